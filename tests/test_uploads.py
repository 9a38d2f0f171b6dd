"""Tests for uploadable-file detection."""

import pytest

from rfml.core import find_uploadables, has_uploadable_files, uploadable_steps
from rfml.models import ActionStep, EmbeddedTest, RFTest


def make_test(*actions: str) -> RFTest:
    """Create a test with one action step per action."""
    return RFTest(steps=[ActionStep(action=action, response="nothing") for action in actions])


class TestHasUploadableFiles:
    """Tests for has_uploadable_files."""

    def test_no_uploadables(self) -> None:
        test = RFTest(
            steps=[
                ActionStep(action="nothing here", response="or here"),
                EmbeddedTest(rfml_id="definitely_nothing_here"),
            ]
        )
        assert has_uploadable_files(test) is False

    def test_file_download(self) -> None:
        assert has_uploadable_files(make_test("{{ file.download(./my/path) }}")) is True

    def test_screenshot(self) -> None:
        assert has_uploadable_files(make_test("{{ file.screenshot(./my/path) }}")) is True

    def test_missing_argument(self) -> None:
        assert has_uploadable_files(make_test("{{ file.download }}")) is False

    @pytest.mark.parametrize(
        "action",
        [
            "{{ file.download() }}",
            "{{ file.download(   ) }}",
            "{{ file.upload(./my/path) }}",
            "{{ other.download(./my/path) }}",
            "file.download(./my/path)",
        ],
    )
    def test_non_matching_calls(self, action: str) -> None:
        assert has_uploadable_files(make_test(action)) is False

    def test_argument_with_parentheses(self) -> None:
        test = make_test("Attach {{ file.download(./report (1).pdf) }}")
        assert has_uploadable_files(test) is True

    def test_empty_steps(self) -> None:
        assert has_uploadable_files(RFTest()) is False

    def test_embedded_test_ids_are_never_uploadable(self) -> None:
        test = RFTest(steps=[EmbeddedTest(rfml_id="{{ file.download(./my/path) }}")])
        assert has_uploadable_files(test) is False

    def test_later_step_is_found(self) -> None:
        test = make_test("Open the page", "Attach {{file.download(./a.pdf)}} to the form")
        assert has_uploadable_files(test) is True

    def test_model_method_delegates(self) -> None:
        assert make_test("{{ file.screenshot(./shot.png) }}").has_uploadable_files() is True

    def test_custom_functions(self) -> None:
        test = make_test("{{ file.upload(./my/path) }}")
        assert has_uploadable_files(test, functions=["upload"]) is True
        assert has_uploadable_files(test, functions=[]) is False


class TestFindUploadables:
    """Tests for find_uploadables and uploadable_steps."""

    def test_finds_every_call_in_order(self) -> None:
        action = (
            "Attach {{ file.download( ./a.pdf ) }} then "
            "{{ file.download() }} and {{ file.screenshot(./b.png) }}"
        )
        found = find_uploadables(action)
        assert [(f.function, f.argument) for f in found] == [
            ("download", "./a.pdf"),
            ("screenshot", "./b.png"),
        ]
        start, end = found[0].span
        assert action[start:end] == "{{ file.download( ./a.pdf ) }}"

    def test_argument_keeps_inner_parentheses(self) -> None:
        found = find_uploadables("{{ file.screenshot(./shots/home (mobile).png) }} then (later)")
        assert [f.argument for f in found] == ["./shots/home (mobile).png"]

    def test_uploadable_steps_reports_indexes(self) -> None:
        test = RFTest(
            steps=[
                ActionStep(action="Open the page"),
                EmbeddedTest(rfml_id="login"),
                ActionStep(action="{{ file.screenshot(./shot.png) }}"),
            ]
        )
        found = uploadable_steps(test)
        assert len(found) == 1
        index, step, files = found[0]
        assert index == 3
        assert step is test.steps[2]
        assert files[0].argument == "./shot.png"
