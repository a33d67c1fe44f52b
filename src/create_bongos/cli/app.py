"""CLI application entry point for create-bongos.

This module is the **sole error boundary** for the entire application.
It catches :class:`~create_bongos.exceptions.CreateBongosError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here: validation, the destination guard and
  manifest patching are delegated to the core layer, the download to
  the infrastructure layer.
* ``print()`` is forbidden outside the CLI layer; the console proxies
  are used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from create_bongos.cli import exit_codes
from create_bongos.cli.console import console, err_console, escape_markup
from create_bongos.core.protocols import NamePrompter, TemplateFetcher
from create_bongos.exceptions import CreateBongosError
from create_bongos.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``create-bongos [project-name]`` — scaffold a project
    * ``create-bongos --version``
    """
    parser = argparse.ArgumentParser(
        prog="create-bongos",
        description="Create a new Bongos Base project.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each step to stderr.",
    )
    parser.add_argument(
        "project_name",
        metavar="project-name",
        nargs="?",
        default=None,
        help="Name of your project (prompted for when omitted).",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Project creation
# ---------------------------------------------------------------------------

def _handle_create(
    project_name: str | None,
    *,
    prompter: NamePrompter | None = None,
    fetcher: TemplateFetcher | None = None,
    cwd: Path | None = None,
) -> int:
    """Scaffold one project.

    Flow:
    1. Resolve the name from the argument or the prompt.
    2. Check that spinners can be shown.
    3. Claim ``cwd/<name>``, download the template into it and rename
       the project in ``package.json``, one spinner per slow step.
    4. Print next steps.
    """
    from create_bongos.cli.name_prompt import QuestionaryNamePrompter
    from create_bongos.cli.reporter import report_next_steps
    from create_bongos.cli.spinner import SpinnerSteps
    from create_bongos.core.input_resolver import resolve_project_request
    from create_bongos.core.project_service import ProjectService

    request = resolve_project_request(
        project_name,
        prompter if prompter is not None else QuestionaryNamePrompter(),
    )
    if request is None:
        console.print()
        console.print("[yellow]Operation cancelled.[/yellow]")
        return exit_codes.SUCCESS

    if fetcher is None:
        from create_bongos.infra.github_fetcher import GitHubTemplateFetcher

        fetcher = GitHubTemplateFetcher()

    steps = SpinnerSteps()
    ProjectService(fetcher).create(request, cwd, observer=steps)

    report_next_steps(request.name)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the create-bongos CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from create_bongos.cli.reporter import display_welcome

    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    display_welcome()
    return _handle_create(args.project_name)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: Sequence[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except CreateBongosError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Tip:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error:[/bold red] "
            f"{type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.GENERAL_ERROR)
