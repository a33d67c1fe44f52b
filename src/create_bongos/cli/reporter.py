"""Welcome banner and closing instructions.

Pure output: nothing here raises.  Without Rich the console proxy falls
back to plain ``print``.
"""

from __future__ import annotations

from create_bongos.cli.console import console, escape_markup

NEXT_STEP_COMMANDS: tuple[str, ...] = (
    "npm install",
    "cp .env.example .env",
    "# Edit .env with your database and Redis settings",
    "npm run docker:up",
    "npm run db:migrate",
    "npm run dev",
)
"""Follow-up commands printed after ``cd <project>``; ``#`` lines are notes."""


def display_welcome() -> None:
    console.print()
    console.print("[bold cyan]🥁  Welcome to Bongos![/bold cyan]")
    console.print("[dim]" + "━" * 50 + "[/dim]")
    console.print()


def report_next_steps(project_name: str) -> None:
    """Print the success summary and the commands to run next."""
    console.print()
    console.print("[bold green]✓ Success![/bold green][dim] Your project is ready.[/dim]")
    console.print()
    console.print("[bold]Next steps:[/bold]")
    console.print()
    console.print(f"[cyan]  cd {escape_markup(project_name)}[/cyan]")
    for command in NEXT_STEP_COMMANDS:
        style = "dim" if command.startswith("#") else "cyan"
        console.print(f"[{style}]  {command}[/{style}]")
    console.print()
    console.print("[dim]Your Express + TypeScript + PostgreSQL + Prisma + Redis API[/dim]")
    console.print("[dim]is ready to go! Happy coding! 🚀[/dim]")
    console.print()
