"""Loading RFML files from disk."""

import logging
from pathlib import Path

from .config import RfmlConfig
from .core import parse_rfml, uploadable_steps
from .logging import line_logger, log_line
from .models import RFTest

logger = logging.getLogger(__name__)


def load_rfml_file(path: Path, config: RfmlConfig) -> RFTest:
    """Read and parse an RFML file.

    Every classified line is logged when debug logging is enabled.

    Args:
        path: Path to the .rfml file
        config: Loaded rfml configuration

    Returns:
        The parsed test

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8 text
        ParseError: If the file is not valid RFML
    """
    logger.debug(f"Parsing {path}")
    sink = log_line if line_logger.isEnabledFor(logging.DEBUG) else None
    return parse_rfml(
        path.read_text(encoding="utf-8"),
        default_redirect=config.parser.default_redirect,
        on_line=sink,
    )


def find_upload_indexes(test: RFTest, config: RfmlConfig) -> set[int]:
    """Return 1-based indexes of steps needing a file upload under config."""
    found = uploadable_steps(
        test, namespace=config.uploads.namespace, functions=config.uploads.functions
    )
    return {index for index, _, _ in found}
