"""Tests for the CLI presentation layer: prompt, spinner, reporter, console.

``questionary`` is mocked; no terminal interaction.  Rich renders into
captured stdout/stderr.
"""

from __future__ import annotations

import importlib.util
import sys
from unittest.mock import MagicMock, patch

import pytest

from create_bongos.cli.console import console, err_console, strip_markup
from create_bongos.cli.name_prompt import (
    PROMPT_MESSAGE,
    QuestionaryNamePrompter,
    _validate_answer,
)
from create_bongos.cli.reporter import NEXT_STEP_COMMANDS, display_welcome, report_next_steps

requires_rich = pytest.mark.skipif(
    importlib.util.find_spec("rich") is None,
    reason="rich not installed",
)


# ---------------------------------------------------------------------------
# Name prompt
# ---------------------------------------------------------------------------

class TestValidateAnswer:
    def test_valid_name_accepted(self) -> None:
        assert _validate_answer("my-app") is True

    @pytest.mark.parametrize("value", ["", "my app", "a/b"])
    def test_invalid_name_returns_message(self, value: str) -> None:
        result = _validate_answer(value)
        assert isinstance(result, str)
        assert "letters, numbers, hyphens, and underscores" in result


class TestQuestionaryNamePrompter:
    def _mock_questionary(self, answer: str | None) -> MagicMock:
        questionary = MagicMock()
        questionary.text.return_value.ask.return_value = answer
        return questionary

    def test_returns_answer(self) -> None:
        questionary = self._mock_questionary("my-app")
        with patch.dict(sys.modules, {"questionary": questionary}):
            answer = QuestionaryNamePrompter().ask_project_name("my-bongos-app")

        assert answer == "my-app"
        questionary.text.assert_called_once_with(
            PROMPT_MESSAGE,
            default="my-bongos-app",
            validate=_validate_answer,
        )

    def test_ctrl_c_returns_none(self) -> None:
        questionary = self._mock_questionary(None)
        with patch.dict(sys.modules, {"questionary": questionary}):
            assert QuestionaryNamePrompter().ask_project_name("x") is None


# ---------------------------------------------------------------------------
# Reporter
# ---------------------------------------------------------------------------

class TestReporter:
    def test_next_steps_in_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        report_next_steps("my-app")
        out = capsys.readouterr().out

        expected = ["Success!", "Next steps:", "cd my-app", *NEXT_STEP_COMMANDS]
        positions = [out.index(line) for line in expected]
        assert positions == sorted(positions)

    def test_welcome_banner(self, capsys: pytest.CaptureFixture[str]) -> None:
        display_welcome()
        assert "Welcome to Bongos!" in capsys.readouterr().out

    def test_reporter_writes_nothing_to_stderr(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        report_next_steps("my-app")
        assert capsys.readouterr().err == ""


# ---------------------------------------------------------------------------
# Console proxies
# ---------------------------------------------------------------------------

class TestConsole:
    @pytest.mark.parametrize(
        ("text", "plain"),
        [
            ("[bold red]Error:[/bold red] boom", "Error: boom"),
            ("[dim]━━[/dim]", "━━"),
            ("plain", "plain"),
            ("\\[project-name]", "[project-name]"),
        ],
    )
    def test_strip_markup(self, text: str, plain: str) -> None:
        assert strip_markup(text) == plain

    def test_streams_are_separate(self, capsys: pytest.CaptureFixture[str]) -> None:
        console.print("to stdout")
        err_console.print("to stderr")
        captured = capsys.readouterr()
        assert "to stdout" in captured.out
        assert "to stderr" in captured.err
        assert "to stderr" not in captured.out

    @requires_rich
    def test_error_lines_not_wrapped_on_narrow_terminal(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("COLUMNS", "20")
        line = 'Error: Directory "/home/someone/projects/my-app" already exists.'

        err_console.print(line)
        assert line in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Spinner
# ---------------------------------------------------------------------------

@requires_rich
class TestSpinner:
    def test_succeed_prints_outcome(self, capsys: pytest.CaptureFixture[str]) -> None:
        from create_bongos.cli.spinner import Spinner

        with Spinner("Working...") as spinner:
            spinner.succeed("Done")
        assert "✔ Done" in capsys.readouterr().out

    def test_fail_prints_outcome(self, capsys: pytest.CaptureFixture[str]) -> None:
        from create_bongos.cli.spinner import Spinner

        with Spinner("Working...") as spinner:
            spinner.fail("Broke")
        assert "✖ Broke" in capsys.readouterr().out

    def test_stop_is_idempotent(self) -> None:
        from create_bongos.cli.spinner import Spinner

        spinner = Spinner("Working...")
        spinner.start()
        spinner.stop()
        spinner.stop()


@requires_rich
class TestSpinnerSteps:
    def test_fetch_step_success_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        from create_bongos.cli.spinner import SpinnerSteps

        with SpinnerSteps().step("fetch"):
            pass
        assert "✔ Template downloaded successfully" in capsys.readouterr().out

    def test_failure_line_and_error_propagates(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from create_bongos.cli.spinner import SpinnerSteps
        from create_bongos.exceptions import PatchFailureError

        with pytest.raises(PatchFailureError):
            with SpinnerSteps().step("patch"):
                raise PatchFailureError("broken")
        out = capsys.readouterr().out
        assert "✖ Failed to configure project" in out
        assert "Project configured" not in out

    def test_missing_manifest_has_its_own_line(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from create_bongos.cli.spinner import SpinnerSteps
        from create_bongos.exceptions import ManifestMissingError

        with pytest.raises(ManifestMissingError):
            with SpinnerSteps().step("patch"):
                raise ManifestMissingError("no manifest")
        assert "✖ package.json not found in template" in capsys.readouterr().out

    def test_requires_rich_at_construction(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from create_bongos.cli.spinner import SpinnerSteps
        from create_bongos.exceptions import EnvironmentError

        monkeypatch.setitem(sys.modules, "rich.progress", None)
        with pytest.raises(EnvironmentError, match="rich is not installed"):
            SpinnerSteps()
