"""Serialization of RFTest documents back to RFML text."""

from typing import assert_never

from ..constants import COMMENT_MARKER, EMBEDDED_TEST_MARKER, IDENTITY_MARKER, LIST_SEPARATOR
from ..models import ActionStep, EmbeddedTest, RFTest, Step


def _directive(key: str, value: str) -> str:
    return f"{COMMENT_MARKER} {key}: {value}"


def _step_text(text: str) -> str:
    # Indent lines that would otherwise read back as a comment or embedded test
    if text.startswith((COMMENT_MARKER, EMBEDDED_TEST_MARKER.rstrip())):
        return f" {text}"
    return text


def _header_lines(test: RFTest) -> list[str]:
    lines: list[str] = []
    if test.rfml_id:
        lines.append(f"{IDENTITY_MARKER}{test.rfml_id}")
    if test.title:
        lines.append(_directive("title", test.title))
    if test.start_uri:
        lines.append(_directive("start_uri", test.start_uri))
    if test.site_id is not None:
        lines.append(_directive("site_id", str(test.site_id)))
    if test.tags:
        lines.append(_directive("tags", f"{LIST_SEPARATOR} ".join(test.tags)))
    if test.browsers:
        lines.append(_directive("browsers", f"{LIST_SEPARATOR} ".join(test.browsers)))
    if test.description:
        # Each description line was stored without its marker and with a trailing newline
        for fragment in test.description.removesuffix("\n").split("\n"):
            lines.append(f"{COMMENT_MARKER}{fragment}")
    return lines


def _step_lines(step: Step, default_redirect: bool) -> list[str]:
    lines: list[str] = []
    if step.redirect != default_redirect:
        lines.append(_directive("redirect", str(step.redirect).lower()))
    match step:
        case ActionStep():
            lines.append(_step_text(step.action))
            if step.response:
                lines.extend(_step_text(line) for line in step.response.split("\n"))
        case EmbeddedTest():
            lines.append(f"{EMBEDDED_TEST_MARKER}{step.rfml_id}")
        case _:
            assert_never(step)
    return lines


def write_rfml(test: RFTest, *, default_redirect: bool = True) -> str:
    """Render a test as RFML text.

    Unset metadata is skipped. Steps are separated by blank lines, and a
    redirect directive is written only for steps that differ from
    ``default_redirect``.

    Args:
        test: Test to render
        default_redirect: Redirect flag the reading side assumes

    Returns:
        RFML document ending with a newline
    """
    blocks = [_header_lines(test)]
    blocks.extend(_step_lines(step, default_redirect) for step in test.steps)
    return "\n\n".join("\n".join(block) for block in blocks if block) + "\n"
