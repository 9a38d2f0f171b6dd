"""RFTest document model.

The parse result for a single RFML file: metadata followed by an ordered
list of steps. Field names match the Rainforest API where one exists.
"""

from typing import Any

from pydantic import BaseModel, Field

from .step import Step


class RFTest(BaseModel):
    """Rainforest test parsed from RFML.

    Attributes:
        rfml_id: Stable identifier from the ``#!`` line. Empty means the
            test has not been assigned one yet.
        title: Human-readable test name.
        start_uri: Path where execution begins.
        site_id: Target site. ``None`` when unset; 0 is a real value.
        description: Comment lines joined with newlines, in file order.
        tags: Trimmed tags, order preserved.
        browsers: Trimmed browser names, order preserved.
        steps: Steps in execution order.
    """

    rfml_id: str = Field(default="", description="RFML identifier")
    title: str = Field(default="", description="Test title")
    start_uri: str = Field(default="", description="Starting location")
    site_id: int | None = Field(default=None, description="Site ID, None if unset")
    description: str = Field(default="", description="Accumulated comment lines")
    tags: list[str] = Field(default_factory=list, description="Tags")
    browsers: list[str] = Field(default_factory=list, description="Browser names")
    steps: list[Step] = Field(default_factory=list, description="Ordered steps")

    def has_uploadable_files(self) -> bool:
        """Return True if any action step requests a file transfer."""
        from ..core.uploads import has_uploadable_files

        return has_uploadable_files(self)

    def to_payload(self) -> dict[str, Any]:
        """Build the metadata payload sent when creating or updating a test.

        ``site_id`` is left out when unset so the service keeps its own value.
        """
        payload: dict[str, Any] = {
            "rfml_id": self.rfml_id,
            "title": self.title,
            "start_uri": self.start_uri,
            "description": self.description,
            "tags": list(self.tags),
            "browser_json": [{"state": "enabled", "name": name} for name in self.browsers],
        }
        if self.site_id is not None:
            payload["site_id"] = self.site_id
        return payload
