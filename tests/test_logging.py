"""Tests for logging configuration."""

import io
import logging

from rfml import parse_rfml
from rfml.logging import configure_logging, log_line


def test_quiet_takes_precedence() -> None:
    configure_logging(verbosity=2, quiet=True, debug=True, stream=io.StringIO())
    assert logging.getLogger().level == logging.WARNING


def test_verbose_enables_debug() -> None:
    configure_logging(verbosity=1, stream=io.StringIO())
    assert logging.getLogger().level == logging.DEBUG


def test_default_is_info() -> None:
    configure_logging(stream=io.StringIO())
    assert logging.getLogger().level == logging.INFO


def test_line_sink_logs_each_line() -> None:
    stream = io.StringIO()
    configure_logging(verbosity=1, no_color=True, stream=stream)
    parse_rfml("#!abc\n# title: T\n", on_line=log_line)
    text = stream.getvalue()
    assert "identity" in text
    assert "title" in text
