"""Project-name predicate shared by the argument and prompt paths."""

from __future__ import annotations

import re

from create_bongos.exceptions import InvalidNameError

_PROJECT_NAME = re.compile(r"[A-Za-z0-9_-]+", re.ASCII)

NAME_RULE_MESSAGE: str = (
    "Project name can only contain letters, numbers, hyphens, and underscores."
)


def is_valid_project_name(name: str) -> bool:
    """Return ``True`` when *name* is a non-empty run of ``[A-Za-z0-9_-]``.

    No trimming or case folding is applied; ``" app"`` is invalid.
    """
    return _PROJECT_NAME.fullmatch(name) is not None


def validate_project_name(name: str) -> str:
    """Return *name* unchanged or raise :class:`InvalidNameError`."""
    if not is_valid_project_name(name):
        raise InvalidNameError(NAME_RULE_MESSAGE)
    return name
