"""Resolve the project name from the command line or an interactive prompt."""

from __future__ import annotations

import logging

from create_bongos.core.models import ProjectRequest
from create_bongos.core.protocols import NamePrompter
from create_bongos.utils.constants import DEFAULT_PROJECT_NAME

logger = logging.getLogger(__name__)


def resolve_project_request(
    argument: str | None,
    prompter: NamePrompter,
    *,
    default: str = DEFAULT_PROJECT_NAME,
) -> ProjectRequest | None:
    """Build a :class:`ProjectRequest` from *argument* or *prompter*.

    A non-empty *argument* is validated as-is and never re-prompted.
    Without one, *prompter* is asked; an empty or ``None`` answer means
    the user cancelled and ``None`` is returned.

    Raises
    ------
    InvalidNameError
        If *argument* (or, defensively, the prompt answer) fails validation.
    """
    if argument:
        logger.debug("Using project name from argument: %r", argument)
        return ProjectRequest.from_name(argument)

    answer = prompter.ask_project_name(default)
    if not answer:
        logger.debug("Name prompt cancelled")
        return None

    logger.debug("Using project name from prompt: %r", answer)
    return ProjectRequest.from_name(answer)
