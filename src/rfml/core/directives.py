"""Directive table for RFML header lines.

Maps each recognized ``# key: value`` directive to a setter on the document
being assembled. Setters raise ParseError for malformed values.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from pydantic import TypeAdapter, ValidationError

from ..constants import LIST_SEPARATOR
from ..errors import ParseError
from ..models import RFTest

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_BOOL_ADAPTER = TypeAdapter(bool)


@dataclass
class DirectiveTarget:
    """Mutable targets a directive can write to.

    Attributes:
        test: Document under construction.
        next_redirect: Redirect flag for the next step started, or None to
            use the reader's default.
    """

    test: RFTest
    next_redirect: bool | None = None


DirectiveSetter = Callable[[DirectiveTarget, str, int], None]


def split_list(value: str) -> list[str]:
    """Split a comma-separated directive value and trim each item."""
    return [item.strip() for item in value.split(LIST_SEPARATOR)]


def _set_title(target: DirectiveTarget, value: str, line_number: int) -> None:
    target.test.title = value


def _set_start_uri(target: DirectiveTarget, value: str, line_number: int) -> None:
    target.test.start_uri = value


def _set_site_id(target: DirectiveTarget, value: str, line_number: int) -> None:
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ParseError(line_number, "Site ID must be a valid integer.")
    target.test.site_id = int(value)


def _set_tags(target: DirectiveTarget, value: str, line_number: int) -> None:
    target.test.tags = split_list(value)


def _set_browsers(target: DirectiveTarget, value: str, line_number: int) -> None:
    target.test.browsers = split_list(value)


def _set_redirect(target: DirectiveTarget, value: str, line_number: int) -> None:
    if not value:
        target.next_redirect = True
        return
    try:
        target.next_redirect = _BOOL_ADAPTER.validate_python(value.lower())
    except ValidationError:
        raise ParseError(line_number, "Redirect must be a valid boolean.") from None


DIRECTIVES: dict[str, DirectiveSetter] = {
    "title": _set_title,
    "start_uri": _set_start_uri,
    "site_id": _set_site_id,
    "tags": _set_tags,
    "browsers": _set_browsers,
    "redirect": _set_redirect,
}


def apply_directive(target: DirectiveTarget, key: str, value: str, line_number: int) -> None:
    """Apply a recognized directive to the target.

    Args:
        target: Document and pending step flags to update
        key: Directive key, already trimmed
        value: Directive value, already trimmed
        line_number: 1-based line number for error reporting

    Raises:
        ParseError: If the value is malformed for the key
        KeyError: If the key is not a recognized directive
    """
    DIRECTIVES[key](target, value, line_number)
