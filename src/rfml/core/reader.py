"""RFML document assembly.

Drives the line classifier over the input, applies directives, accumulates
the description and builds steps, producing a complete RFTest or raising a
ParseError for the first malformed line.

Step grammar:

    # redirect: false          applies to the next step started
    Open the settings page     action (starts a step)
    Is the page visible?       response
    Is the header shown?       more response lines are joined with newlines
                               blank line ends the step
    - shared_logout            embedded test, a complete step on its own
"""

import io
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO, assert_never

from ..errors import ParseError, ReaderStateError
from ..models import ActionStep, EmbeddedTest, RFTest
from .directives import DirectiveTarget, apply_directive
from .lines import ClassifiedLine, LineKind, classify_line

logger = logging.getLogger(__name__)

LineSink = Callable[[ClassifiedLine], None]


class ReaderState(str, Enum):
    """Assembly states of an RFMLReader."""

    AWAITING_HEADER = "awaiting_header"
    IN_DESCRIPTION_RUN = "in_description_run"
    BUILDING_STEP = "building_step"
    DONE = "done"
    FAILED = "failed"


@dataclass
class _PendingStep:
    """Step still being assembled."""

    action: str
    redirect: bool
    response_lines: list[str] = field(default_factory=list)

    def finish(self) -> ActionStep:
        return ActionStep(
            action=self.action,
            response="\n".join(self.response_lines),
            redirect=self.redirect,
        )


class RFMLReader:
    """Single-use RFML parser.

    Example:
        >>> reader = RFMLReader("#!login\\n# title: Login\\n\\nLog in\\nDid it work?\\n")
        >>> test = reader.read_all()
        >>> test.title
        'Login'
    """

    def __init__(
        self,
        source: str | Iterable[str],
        *,
        default_redirect: bool = True,
        on_line: LineSink | None = None,
    ) -> None:
        """Create a reader.

        Args:
            source: RFML text, or an iterable of lines such as an open file
            default_redirect: Redirect flag for steps without a redirect directive
            on_line: Optional diagnostic sink called with every classified line
        """
        self._source = io.StringIO(source) if isinstance(source, str) else source
        self._default_redirect = default_redirect
        self._on_line = on_line
        self._state = ReaderState.AWAITING_HEADER
        self._started = False
        self._target = DirectiveTarget(test=RFTest())
        self._description: list[str] = []
        self._pending: _PendingStep | None = None

    @property
    def state(self) -> ReaderState:
        """Current assembly state."""
        return self._state

    def read_all(self) -> RFTest:
        """Parse the whole input.

        Returns:
            The parsed test

        Raises:
            ParseError: On the first malformed line
            ReaderStateError: If this reader was already used
        """
        if self._started:
            raise ReaderStateError(f"Reader already used (state: {self._state.value})")
        self._started = True

        try:
            for line_number, line in enumerate(self._lines(), start=1):
                classified = classify_line(line, line_number)
                if self._on_line is not None:
                    self._on_line(classified)
                self._consume(classified)
        except ParseError as e:
            self._state = ReaderState.FAILED
            logger.debug(f"Parse failed: {e}")
            raise

        self._finish_pending()
        test = self._target.test
        test.description = "".join(f"{fragment}\n" for fragment in self._description)
        self._state = ReaderState.DONE
        logger.debug(f"Parsed RFML test {test.rfml_id!r} with {len(test.steps)} steps")
        return test

    def _lines(self) -> Iterator[str]:
        for line in self._source:
            yield line.rstrip("\r\n")

    def _consume(self, line: ClassifiedLine) -> None:
        match line.kind:
            case LineKind.IDENTITY:
                self._target.test.rfml_id = line.text
            case LineKind.DIRECTIVE:
                assert line.key is not None and line.value is not None
                apply_directive(self._target, line.key, line.value, line.line_number)
            case LineKind.COMMENT:
                self._description.append(line.text)
                if self._pending is None:
                    self._state = ReaderState.IN_DESCRIPTION_RUN
            case LineKind.BLANK:
                self._finish_pending()
            case LineKind.EMBEDDED_TEST:
                if not line.text:
                    raise ParseError(line.line_number, "Embedded test must have an RFML ID.")
                self._finish_pending()
                self._target.test.steps.append(
                    EmbeddedTest(rfml_id=line.text, redirect=self._take_redirect())
                )
                self._state = ReaderState.BUILDING_STEP
            case LineKind.STEP_TEXT:
                if self._pending is None:
                    self._pending = _PendingStep(action=line.text, redirect=self._take_redirect())
                    self._state = ReaderState.BUILDING_STEP
                else:
                    self._pending.response_lines.append(line.text)
            case _:
                assert_never(line.kind)

    def _take_redirect(self) -> bool:
        """Consume the redirect flag set by the last redirect directive."""
        redirect = self._target.next_redirect
        self._target.next_redirect = None
        return self._default_redirect if redirect is None else redirect

    def _finish_pending(self) -> None:
        if self._pending is not None:
            self._target.test.steps.append(self._pending.finish())
            self._pending = None


def parse_rfml(
    text: str,
    *,
    default_redirect: bool = True,
    on_line: LineSink | None = None,
) -> RFTest:
    """Parse RFML text into an RFTest.

    Args:
        text: Full RFML document
        default_redirect: Redirect flag for steps without a redirect directive
        on_line: Optional diagnostic sink

    Returns:
        The parsed test

    Raises:
        ParseError: On the first malformed line
    """
    return RFMLReader(text, default_redirect=default_redirect, on_line=on_line).read_all()


def read_rfml(
    stream: TextIO,
    *,
    default_redirect: bool = True,
    on_line: LineSink | None = None,
) -> RFTest:
    """Parse RFML from an open text stream."""
    return RFMLReader(stream, default_redirect=default_redirect, on_line=on_line).read_all()
