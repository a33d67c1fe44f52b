"""Rich-based spinners shown while workflow steps run.

Design
------
* :class:`Spinner` manages a transient Rich Progress with a single
  indeterminate task.
* :meth:`Spinner.succeed` / :meth:`Spinner.fail` stop the animation and
  leave a one-line outcome behind.
* :class:`SpinnerSteps` adapts spinners to the core
  :class:`~create_bongos.core.protocols.StepObserver` protocol.
* Shutdown-safe: stopping an already stopped spinner is a no-op.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from create_bongos.cli.console import console, get_rich_console
from create_bongos.core.project_service import STEP_FETCH, STEP_PATCH
from create_bongos.exceptions import (
    CreateBongosError,
    EnvironmentError,
    ManifestMissingError,
)


def _load_progress_classes() -> tuple[Any, Any, Any]:
    """Return Rich's ``Progress`` building blocks or raise ``EnvironmentError``."""
    try:
        from rich.progress import Progress, SpinnerColumn, TextColumn
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Progress, SpinnerColumn, TextColumn


class Spinner:
    """Animated status line for one step of the workflow.

    Usage::

        with Spinner("Downloading template...") as spinner:
            fetch()
            spinner.succeed("Template downloaded successfully")

    Leaving the block without calling :meth:`succeed` or :meth:`fail`
    simply clears the line.
    """

    def __init__(self, text: str) -> None:
        progress_class, spinner_column, text_column = _load_progress_classes()

        self._text: str = text
        self._progress: Any = progress_class(
            spinner_column(style="cyan"),
            text_column("{task.description}"),
            console=get_rich_console(),
            transient=True,
        )
        self._started: bool = False

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the animation."""
        if not self._started:
            self._progress.start()
            self._progress.add_task(self._text, total=None)
            self._started = True

    def stop(self) -> None:
        """Stop the animation (idempotent)."""
        if self._started:
            self._progress.stop()
            self._started = False

    # ------------------------------------------------------------------
    # Outcomes
    # ------------------------------------------------------------------

    def succeed(self, message: str) -> None:
        self.stop()
        console.print(f"[green]✔[/green] {message}")

    def fail(self, message: str) -> None:
        self.stop()
        console.print(f"[red]✖[/red] {message}")


# (running text, success line, failure line) per pipeline step.
_STEP_MESSAGES: dict[str, tuple[str, str, str]] = {
    STEP_FETCH: (
        "Downloading bongos-base template...",
        "Template downloaded successfully",
        "Failed to download template",
    ),
    STEP_PATCH: (
        "Configuring project...",
        "Project configured",
        "Failed to configure project",
    ),
}

MANIFEST_MISSING_LINE: str = "package.json not found in template"


class SpinnerSteps:
    """One :class:`Spinner` per observed pipeline step.

    Construction checks that Rich is importable, so a missing dependency
    surfaces before the project directory is created.
    """

    def __init__(self) -> None:
        _load_progress_classes()

    @contextmanager
    def step(self, name: str) -> Iterator[None]:
        running, succeeded, failed = _STEP_MESSAGES[name]
        with Spinner(running) as spinner:
            try:
                yield
            except ManifestMissingError:
                spinner.fail(MANIFEST_MISSING_LINE)
                raise
            except CreateBongosError:
                spinner.fail(failed)
                raise
            spinner.succeed(succeeded)
