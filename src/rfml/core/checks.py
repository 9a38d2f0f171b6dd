"""Completeness checks for parsed tests.

Missing metadata is not a parse error. These checks report what a test
still needs before it can be submitted.
"""

from ..models import RFTest


def check_document(test: RFTest) -> list[str]:
    """Return warnings for metadata or steps missing from a test."""
    warnings: list[str] = []
    if not test.rfml_id:
        warnings.append("No RFML ID; the test will be created as new")
    if not test.title:
        warnings.append("No title set")
    if not test.start_uri:
        warnings.append("No start_uri set")
    if test.site_id is None:
        warnings.append("No site_id set")
    if not test.browsers:
        warnings.append("No browsers set")
    if not test.steps:
        warnings.append("Test has no steps")
    return warnings
