"""Detection of steps that need file transfer.

Step actions may embed template calls such as ``{{ file.download(./a.pdf) }}``
or ``{{ file.screenshot(./shot.png) }}``. A call with a concrete argument
means the referenced file must be uploaded before the test is submitted.
A call without one (``{{ file.download }}`` or ``{{ file.download( ) }}``)
is a placeholder and is ignored.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from typing import assert_never

from ..constants import UPLOAD_FUNCTIONS, UPLOAD_NAMESPACE
from ..models import ActionStep, EmbeddedTest, RFTest


@dataclass(frozen=True)
class UploadableFile:
    """A file-transfer call found in a step action."""

    function: str
    argument: str
    span: tuple[int, int]


@lru_cache(maxsize=32)
def _call_pattern(namespace: str, functions: tuple[str, ...]) -> re.Pattern[str]:
    names = "|".join(re.escape(name) for name in functions)
    return re.compile(
        r"\{\{\s*" + re.escape(namespace) + r"\.(?P<function>" + names + r")"
        # The argument may hold parentheses; it ends at the last ")" before "}}"
        r"\((?P<argument>(?:(?!\}\}).)*?)\)\s*\}\}"
    )


def find_uploadables(
    action: str,
    *,
    namespace: str = UPLOAD_NAMESPACE,
    functions: Iterable[str] = UPLOAD_FUNCTIONS,
) -> list[UploadableFile]:
    """Find file-transfer calls with a non-blank argument in an action.

    Args:
        action: Step action text
        namespace: Template object the functions live on
        functions: Upload-triggering function names

    Returns:
        Calls in order of appearance, arguments trimmed
    """
    functions = tuple(functions)
    if not functions:
        return []
    pattern = _call_pattern(namespace, functions)
    return [
        UploadableFile(
            function=match.group("function"),
            argument=match.group("argument").strip(),
            span=match.span(),
        )
        for match in pattern.finditer(action)
        if match.group("argument").strip()
    ]


def uploadable_steps(
    test: RFTest,
    *,
    namespace: str = UPLOAD_NAMESPACE,
    functions: Iterable[str] = UPLOAD_FUNCTIONS,
) -> list[tuple[int, ActionStep, list[UploadableFile]]]:
    """List every step needing file transfer.

    Returns:
        Tuples of (1-based step index, step, uploadable calls)
    """
    functions = tuple(functions)
    found = []
    for index, step in enumerate(test.steps, start=1):
        match step:
            case ActionStep():
                files = find_uploadables(step.action, namespace=namespace, functions=functions)
                if files:
                    found.append((index, step, files))
            case EmbeddedTest():
                continue
            case _:
                assert_never(step)
    return found


def has_uploadable_files(
    test: RFTest,
    *,
    namespace: str = UPLOAD_NAMESPACE,
    functions: Iterable[str] = UPLOAD_FUNCTIONS,
) -> bool:
    """Return True if any action step requests a file transfer."""
    functions = tuple(functions)
    for step in test.steps:
        match step:
            case ActionStep():
                if find_uploadables(step.action, namespace=namespace, functions=functions):
                    return True
            case EmbeddedTest():
                continue
            case _:
                assert_never(step)
    return False
