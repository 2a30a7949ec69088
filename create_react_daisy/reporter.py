"""Operator-facing progress output."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from create_react_daisy.config import ScaffoldConfig
from create_react_daisy.models import RunRequest
from create_react_daisy.utils import console as default_console
from create_react_daisy.utils import err_console as default_err_console

CANCELLED_MESSAGE = "Project creation cancelled"

NEXT_STEP_SCRIPTS: tuple[tuple[str, str], ...] = (
    ("dev", "Starts the development server."),
    ("build", "Bundles the app into static files for production."),
    ("preview", "Previews the built app before deployment."),
)


class ProgressReporter:
    """Prints banners, step announcements and failures for one run.

    Normal output goes to *console*; failures go to *err_console* (stderr).
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.console = console or default_console
        self.err_console = err_console or default_err_console

    def start(self, request: RunRequest, project_path: Path) -> None:
        """Banner naming the resolved path, language and template."""
        self.console.print()
        self.console.print(
            Panel(
                f"Creating a new React app in [green]{escape(str(project_path))}[/green]\n"
                f"Language : [green]{request.language.label}[/green]\n"
                f"Template : [green]{request.template.label}[/green]",
                title="[bold]create-react-daisy[/bold]",
                border_style="blue",
            )
        )

    def step(self, message: str) -> None:
        """Announce what is about to happen."""
        self.console.print()
        self.console.print(f"[bold blue]>[/bold blue] {escape(message)}")

    def success(self, request: RunRequest, project_path: Path) -> None:
        """Success banner followed by the next-steps block."""
        name = escape(request.project_name)
        self.console.print()
        self.console.print(
            Panel(
                f"Created [bold]{name}[/bold] at [green]{escape(str(project_path))}[/green]",
                title="[bold green]Success![/bold green]",
                border_style="green",
            )
        )
        self.next_steps(request)

    def next_steps(self, request: RunRequest) -> None:
        self.console.print("\nInside that directory, you can run several commands:")
        for script, description in NEXT_STEP_SCRIPTS:
            self.console.print(f"\n  [cyan]{self.config.run_script_command(script)}[/cyan]")
            self.console.print(f"    {description}")
        self.console.print("\nWe suggest that you begin by typing:")
        self.console.print(f"\n  [cyan]cd {escape(request.project_name)}[/cyan]")
        self.console.print(f"  [cyan]{self.config.run_script_command('dev')}[/cyan]")
        self.console.print("\nHappy hacking!")

    def warning(self, message: str) -> None:
        self.console.print(f"[bold yellow]{escape(message)}[/bold yellow]")

    def failure(self, message: str) -> None:
        self.err_console.print(f"[bold red]Error creating project:[/bold red] {escape(message)}")

    def cancelled(self) -> None:
        self.err_console.print(f"[bold red]{CANCELLED_MESSAGE}[/bold red]")
