"""Tests for completeness checks."""

from rfml import parse_rfml
from rfml.core import check_document
from rfml.models import ActionStep, RFTest


def test_complete_document_has_no_warnings(sample_rfml: str) -> None:
    assert check_document(parse_rfml(sample_rfml)) == []


def test_empty_document_reports_everything() -> None:
    warnings = check_document(RFTest())
    assert len(warnings) == 6
    assert "Test has no steps" in warnings


def test_site_id_zero_counts_as_set() -> None:
    test = RFTest(
        rfml_id="a",
        title="t",
        start_uri="/",
        site_id=0,
        browsers=["chrome"],
        steps=[ActionStep(action="x")],
    )
    assert check_document(test) == []
