"""Tests for the questionary prompter (cli/prompter.py).

``questionary`` is mocked via ``_import_questionary`` — no terminal
interaction.  We test the mapping between prompt requests and
questionary calls.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from create_compute.cli.prompter import QuestionaryPrompter
from create_compute.core.prompts import Choice, SelectRequest, TextRequest


def _fake_choice_class() -> type:
    """Return a minimal Choice-like class for mocking questionary.Choice."""

    class FakeChoice:
        def __init__(self, title: str, value: str, description: str | None = None) -> None:
            self.title = title
            self.value = value
            self.description = description

    return FakeChoice


def _questionary(answer: object) -> MagicMock:
    questionary_mod = MagicMock()
    questionary_mod.Choice = _fake_choice_class()
    questionary_mod.select.return_value.ask.return_value = answer
    questionary_mod.text.return_value.ask.return_value = answer
    questionary_mod.confirm.return_value.ask.return_value = answer
    return questionary_mod


# ---------------------------------------------------------------------------
# Select
# ---------------------------------------------------------------------------

class TestSelect:
    @patch("create_compute.cli.prompter._import_questionary")
    def test_returns_selected_value(self, mock_q: MagicMock) -> None:
        questionary_mod = _questionary("typescript")
        mock_q.return_value = questionary_mod

        request = SelectRequest(
            message="Select a language",
            choices=(
                Choice(value="javascript", label="JavaScript"),
                Choice(value="typescript", label="TypeScript", hint="Typed"),
            ),
        )
        assert QuestionaryPrompter().ask(request) == "typescript"

        choices = questionary_mod.select.call_args.kwargs["choices"]
        assert [c.title for c in choices] == ["JavaScript", "TypeScript"]
        assert choices[1].description == "Typed"

    @patch("create_compute.cli.prompter._import_questionary")
    def test_cancel_returns_none(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(None)
        request = SelectRequest(message="Pick", choices=(Choice("a", "A"),))
        assert QuestionaryPrompter().ask(request) is None


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

class TestText:
    @patch("create_compute.cli.prompter._import_questionary")
    def test_validator_adapter(self, mock_q: MagicMock) -> None:
        questionary_mod = _questionary("./app")
        mock_q.return_value = questionary_mod

        request = TextRequest(
            message="Where?",
            default="./",
            validate=lambda value: None if value else "Cannot be empty!",
        )
        assert QuestionaryPrompter().ask(request) == "./app"

        kwargs = questionary_mod.text.call_args.kwargs
        assert kwargs["default"] == "./"
        assert kwargs["validate"]("./app") is True
        assert kwargs["validate"]("") == "Cannot be empty!"

    @patch("create_compute.cli.prompter._import_questionary")
    def test_without_validator(self, mock_q: MagicMock) -> None:
        questionary_mod = _questionary("anything")
        mock_q.return_value = questionary_mod

        QuestionaryPrompter().ask(TextRequest(message="Anything?"))
        assert questionary_mod.text.call_args.kwargs["validate"]("") is True


# ---------------------------------------------------------------------------
# Confirm and notes
# ---------------------------------------------------------------------------

class TestConfirmAndNote:
    @patch("create_compute.cli.prompter._import_questionary")
    def test_confirm(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(True)
        assert QuestionaryPrompter().confirm("Sure?") is True

    @patch("create_compute.cli.prompter.console")
    def test_note_prints(self, mock_console: MagicMock) -> None:
        QuestionaryPrompter().note("Using directory: /tmp/app")
        printed = mock_console.print.call_args.args[0]
        assert "Using directory: /tmp/app" in printed
