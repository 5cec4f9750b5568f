"""questionary-backed implementation of :class:`~create_compute.core.protocols.Prompter`.

Renders the prompt requests yielded by the resolution flow.  ``ask()``
returns ``None`` when the user cancels (Ctrl+C / Esc), which the flow
turns into an :class:`~create_compute.exceptions.ExecParamsCancelledError`.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any

from create_compute.cli.console import console
from create_compute.core.prompts import PromptRequest, SelectRequest, TextRequest
from create_compute.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class QuestionaryPrompter:
    """Interactive terminal prompter."""

    def ask(self, request: PromptRequest) -> str | None:
        questionary = _import_questionary()

        if isinstance(request, SelectRequest):
            choices = [
                questionary.Choice(
                    title=choice.label,
                    value=choice.value,
                    description=choice.hint,
                )
                for choice in request.choices
            ]
            answer: str | None = questionary.select(
                request.message,
                choices=choices,
                use_arrow_keys=True,
                use_shortcuts=False,
            ).ask()  # None on Ctrl+C / Esc
            return answer

        validate = request.validate

        def _validate(value: str) -> bool | str:
            if validate is None:
                return True
            return validate(value) or True

        answer = questionary.text(
            request.message,
            default=request.default,
            validate=_validate,
        ).ask()
        return answer

    def confirm(self, message: str) -> bool | None:
        """Yes/no question; ``None`` on cancel."""
        questionary = _import_questionary()
        answer: bool | None = questionary.confirm(message, default=True).ask()
        return answer

    def note(self, message: str) -> None:
        console.print(f"[cyan]●[/cyan] {message}")

    def status(self, message: str) -> AbstractContextManager[Any]:
        return console.status(message)
