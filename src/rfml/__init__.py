"""rfml: parser and document model for Rainforest RFML test files."""

__version__ = "0.1.0"

from .core import RFMLReader, has_uploadable_files, parse_rfml, read_rfml, write_rfml
from .errors import ParseError, ReaderStateError, RFMLError
from .models import ActionStep, EmbeddedTest, RFTest, Step

__all__ = [
    "ActionStep",
    "EmbeddedTest",
    "ParseError",
    "RFMLError",
    "RFMLReader",
    "RFTest",
    "ReaderStateError",
    "Step",
    "__version__",
    "has_uploadable_files",
    "parse_rfml",
    "read_rfml",
    "write_rfml",
]
