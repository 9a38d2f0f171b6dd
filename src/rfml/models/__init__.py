"""Pydantic data models for RFML documents.

This package defines:
- The parsed test document (RFTest)
- The two step variants (ActionStep, EmbeddedTest) and their union (Step)

Example:
    >>> from rfml.models import ActionStep, RFTest
    >>> test = RFTest(title="Login", steps=[ActionStep(action="Log in", response="OK?")])
    >>> test.model_dump_json()
"""

from .step import ActionStep, EmbeddedTest, Step
from .document import RFTest

__all__ = [
    "ActionStep",
    "EmbeddedTest",
    "RFTest",
    "Step",
]
