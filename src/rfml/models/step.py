"""Step models for RFML tests.

A test's steps are a closed union of two variants: a plain action/response
pair and a reference to another test that is spliced in at that point.
The union is discriminated on ``kind`` so it survives JSON round-trips.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ActionStep(BaseModel):
    """Single action/response step.

    Attributes:
        action: Instruction the tester performs.
        response: Expected outcome, phrased as a question. May be empty.
        redirect: Whether the step restarts navigation tracking.

    Example:
        >>> ActionStep(action="Click login", response="Did the form appear?")
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["step"] = "step"
    action: str = Field(description="Instruction to perform")
    response: str = Field(default="", description="Expected outcome")
    redirect: bool = Field(default=True, description="Restart navigation tracking")


class EmbeddedTest(BaseModel):
    """Reference to another RFML test embedded at this position."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["embedded_test"] = "embedded_test"
    rfml_id: str = Field(description="RFML ID of the embedded test")
    redirect: bool = Field(default=True, description="Restart navigation tracking")


Step = Annotated[ActionStep | EmbeddedTest, Field(discriminator="kind")]
