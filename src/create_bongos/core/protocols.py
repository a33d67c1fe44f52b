"""Protocols (interfaces) consumed by the core layer.

These define the contracts that the interactive prompt, the remote
fetch and the progress display must satisfy.  Core code depends ONLY
on these protocols, never on concrete implementations, so the workflow
runs in tests against fakes with canned answers and errors.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol


class NamePrompter(Protocol):
    """Contract for asking the user for a project name.

    Any object that implements :meth:`ask_project_name` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def ask_project_name(self, default: str) -> str | None:
        """Ask for a project name, suggesting *default*.

        Implementations must reject input failing
        :func:`~create_bongos.core.validation.is_valid_project_name` and
        ask again.

        Returns
        -------
        str | None
            The submitted name, or ``None`` (or ``""``) when the user
            cancelled the prompt.
        """
        ...  # pragma: no cover


class TemplateFetcher(Protocol):
    """Contract for template acquisition backends.

    Implementations materialize a fixed remote template into a local
    directory and must map all backend-specific exceptions to
    :class:`~create_bongos.exceptions.FetchFailureError`.
    """

    def fetch(self, destination: Path) -> None:
        """Populate *destination* with the template's file tree.

        Existing files inside *destination* are overwritten.  Version
        control metadata is not copied.

        Raises
        ------
        FetchFailureError
            On any network, remote-repository, or filesystem error.
        """
        ...  # pragma: no cover


class StepObserver(Protocol):
    """Contract for presenting progress of the long-running pipeline steps."""

    def step(self, name: str) -> AbstractContextManager[object]:
        """Return a context manager wrapped around step *name*.

        *name* is ``"fetch"`` or ``"patch"``.  Exceptions raised inside the
        block must propagate unchanged.
        """
        ...  # pragma: no cover
