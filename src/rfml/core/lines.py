"""Line classification for RFML.

Every physical line of an RFML file falls into exactly one kind, decided
from its prefix alone:

    #!abc-123                 identity
    # title: Login works      directive (recognized key)
    # Checks the login form   comment (folded into the description)
    - shared_login            embedded test reference
    Click the login button    step text (action or response)
                              blank (step boundary)
"""

from dataclasses import dataclass
from enum import Enum

from ..constants import (
    COMMENT_MARKER,
    DIRECTIVE_SEPARATOR,
    EMBEDDED_TEST_MARKER,
    IDENTITY_MARKER,
)

DIRECTIVE_KEYS = frozenset({"title", "start_uri", "site_id", "tags", "browsers", "redirect"})


class LineKind(str, Enum):
    """Kinds of RFML lines."""

    IDENTITY = "identity"
    DIRECTIVE = "directive"
    COMMENT = "comment"
    BLANK = "blank"
    EMBEDDED_TEST = "embedded_test"
    STEP_TEXT = "step_text"


@dataclass(frozen=True)
class ClassifiedLine:
    """A single input line and its classification.

    ``text`` holds the identity, the comment fragment, the embedded RFML ID
    or the trimmed step text depending on ``kind``. ``key`` and ``value`` are
    only set for directives.
    """

    kind: LineKind
    line_number: int
    text: str = ""
    key: str | None = None
    value: str | None = None


def classify_line(line: str, line_number: int) -> ClassifiedLine:
    """Classify one line of RFML.

    Args:
        line: Line content without its terminator
        line_number: 1-based position of the line in the input

    Returns:
        The classified line
    """
    if line.startswith(IDENTITY_MARKER):
        return ClassifiedLine(LineKind.IDENTITY, line_number, line[len(IDENTITY_MARKER) :])

    if line.startswith(COMMENT_MARKER):
        content = line[len(COMMENT_MARKER) :]
        if DIRECTIVE_SEPARATOR in content:
            raw_key, raw_value = content.split(DIRECTIVE_SEPARATOR, 1)
            key = raw_key.strip()
            if key in DIRECTIVE_KEYS:
                return ClassifiedLine(
                    LineKind.DIRECTIVE, line_number, content, key=key, value=raw_value.strip()
                )
        return ClassifiedLine(LineKind.COMMENT, line_number, content)

    if not line.strip():
        return ClassifiedLine(LineKind.BLANK, line_number)

    # A bare "-" is still an embedded test, just one missing its ID
    stripped = line.rstrip()
    if line.startswith(EMBEDDED_TEST_MARKER) or stripped == EMBEDDED_TEST_MARKER.rstrip():
        rfml_id = stripped[len(EMBEDDED_TEST_MARKER.rstrip()) :].strip()
        return ClassifiedLine(LineKind.EMBEDDED_TEST, line_number, rfml_id)

    return ClassifiedLine(LineKind.STEP_TEXT, line_number, line.strip())
