"""Core RFML logic.

This package contains pure parsing logic with no file I/O:
- lines: Line classification
- directives: Directive table for header metadata
- reader: Document assembly (RFMLReader)
- uploads: Detection of steps needing file transfer
- writer: Rendering documents back to RFML
- checks: Completeness warnings
"""

from .checks import check_document
from .directives import DIRECTIVES, apply_directive, split_list
from .lines import DIRECTIVE_KEYS, ClassifiedLine, LineKind, classify_line
from .reader import ReaderState, RFMLReader, parse_rfml, read_rfml
from .uploads import UploadableFile, find_uploadables, has_uploadable_files, uploadable_steps
from .writer import write_rfml

__all__ = [
    "DIRECTIVES",
    "DIRECTIVE_KEYS",
    "ClassifiedLine",
    "LineKind",
    "RFMLReader",
    "ReaderState",
    "UploadableFile",
    "apply_directive",
    "check_document",
    "classify_line",
    "find_uploadables",
    "has_uploadable_files",
    "parse_rfml",
    "read_rfml",
    "split_list",
    "uploadable_steps",
    "write_rfml",
]
