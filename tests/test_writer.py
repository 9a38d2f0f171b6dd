"""Tests for rendering tests back to RFML."""

from rfml import parse_rfml, write_rfml
from rfml.models import ActionStep, EmbeddedTest, RFTest


def test_write_full_document() -> None:
    test = RFTest(
        rfml_id="login-works",
        title="Login works",
        start_uri="/login",
        site_id=0,
        description="Checks login.\n",
        tags=["smoke", "auth"],
        browsers=["chrome"],
        steps=[
            ActionStep(action="Log in", response="Dashboard?\nMenu?"),
            EmbeddedTest(rfml_id="logout", redirect=False),
        ],
    )
    assert write_rfml(test) == (
        "#!login-works\n"
        "# title: Login works\n"
        "# start_uri: /login\n"
        "# site_id: 0\n"
        "# tags: smoke, auth\n"
        "# browsers: chrome\n"
        "#Checks login.\n"
        "\n"
        "Log in\n"
        "Dashboard?\n"
        "Menu?\n"
        "\n"
        "# redirect: false\n"
        "- logout\n"
    )


def test_unset_metadata_is_skipped() -> None:
    text = write_rfml(RFTest(steps=[ActionStep(action="Do it", response="Done?")]))
    assert text == "Do it\nDone?\n"


def test_redirect_written_relative_to_default() -> None:
    test = RFTest(steps=[ActionStep(action="Do it", redirect=True)])
    assert write_rfml(test, default_redirect=False) == "# redirect: true\nDo it\n"


def test_parsed_document_survives_rewrite(sample_rfml: str) -> None:
    test = parse_rfml(sample_rfml)
    assert parse_rfml(write_rfml(test)) == test


def test_marker_like_step_lines_stay_step_text() -> None:
    """Indented lines starting with # or - keep their meaning after a rewrite."""
    test = parse_rfml("Open the menu\n   # of items\n\nCheck the list\n  - item one\n  -\n")
    assert [step.response for step in test.steps] == ["# of items", "- item one\n-"]
    text = write_rfml(test)
    assert text == "Open the menu\n # of items\n\nCheck the list\n - item one\n -\n"
    assert parse_rfml(text) == test
