"""Interactive project-name prompt for the CLI layer.

Implements :class:`~create_bongos.core.protocols.NamePrompter` on top of
questionary.  Validation happens inside the prompt, so an invalid answer
is rejected in place and the user is asked again.
"""

from __future__ import annotations

from typing import Any

from create_bongos.core.validation import NAME_RULE_MESSAGE, is_valid_project_name
from create_bongos.exceptions import EnvironmentError

PROMPT_MESSAGE: str = "What is your project named?"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _validate_answer(value: str) -> bool | str:
    """questionary validator: ``True`` or the message shown under the input."""
    if is_valid_project_name(value):
        return True
    return NAME_RULE_MESSAGE.rstrip(".")


class QuestionaryNamePrompter:
    """Ask for the project name with a text prompt."""

    def ask_project_name(self, default: str) -> str | None:
        """Return the submitted name, or ``None`` on Ctrl+C / Esc."""
        questionary = _import_questionary()
        answer: str | None = questionary.text(
            PROMPT_MESSAGE,
            default=default,
            validate=_validate_answer,
        ).ask()
        return answer
