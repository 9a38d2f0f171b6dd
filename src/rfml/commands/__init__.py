"""CLI command implementations for rfml.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .check import check
from .fmt import fmt
from .init import init
from .show import show

__all__ = [
    "check",
    "fmt",
    "init",
    "show",
]
