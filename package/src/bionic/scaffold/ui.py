"""
Bionic Console UI Components

Status lines, prompts and summaries for the scaffolding commands using the
rich library.
"""

from typing import Optional, List, Callable, Tuple
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt, Confirm
from rich.table import Table


class ScaffoldUI:
    """UI components for Bionic commands."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_header(self, title: str = "Preparing your Bionic Project..."):
        """Print the command header."""
        self.console.print()
        self.console.print(Panel(
            f"[bold blue]🤖  {title}[/bold blue]",
            border_style="blue",
            padding=(0, 2)
        ))
        self.console.print()

    def print_project_header(self, index: int, total: int, name: str, role: str):
        """Print a header for the project being set up."""
        self.console.print()
        self.console.print(
            f"[bold cyan]Project {index}/{total}:[/bold cyan] [bold]{name}[/bold] [dim]({role})[/dim]"
        )

    def print_success(self, message: str):
        """Print a success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def print_error(self, message: str):
        """Print an error message."""
        self.console.print(f"[red]☠[/red]  {message}")

    def print_warning(self, message: str):
        """Print a warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    def print_info(self, message: str):
        """Print an info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def prompt_text(
        self,
        prompt: str,
        default: str = "",
        required: bool = False,
        validator: Optional[Callable[[str], bool]] = None,
        error_message: str = "Invalid input"
    ) -> str:
        """Prompt for text input."""
        while True:
            value = Prompt.ask(
                f"[green]{prompt}[/green]",
                default=default if default else None,
                console=self.console
            )

            if required and not value:
                self.print_error("This field is required")
                continue

            if validator and value and not validator(value):
                self.print_error(error_message)
                continue

            return value

    def prompt_confirm(self, prompt: str, default: bool = False) -> bool:
        """Prompt for yes/no confirmation."""
        return Confirm.ask(f"[green]{prompt}[/green]", default=default, console=self.console)

    def prompt_choice(
        self,
        prompt: str,
        choices: List[str],
        default: Optional[str] = None
    ) -> str:
        """Prompt for a choice from a list."""
        self.console.print(f"\n[green]{prompt}[/green]")
        for i, choice in enumerate(choices, 1):
            marker = "[bold green]→[/bold green]" if choice == default else " "
            self.console.print(f"  {marker} [{i}] {choice}")

        while True:
            selection = Prompt.ask(
                "Enter number or name",
                default=str(choices.index(default) + 1) if default else None,
                console=self.console
            )

            # Try numeric selection
            try:
                idx = int(selection) - 1
                if 0 <= idx < len(choices):
                    return choices[idx]
            except (TypeError, ValueError):
                pass

            # Try name match
            for choice in choices:
                if selection and choice.lower() == selection.lower():
                    return choice

            self.print_error(f"Invalid selection. Choose 1-{len(choices)}")

    def show_summary_table(self, title: str, rows: List[Tuple[str, str, str]]):
        """Show a summary table of (project, role, status) rows."""
        table = Table(title=title, border_style="blue")
        table.add_column("Project", style="cyan")
        table.add_column("Role", style="white")
        table.add_column("Status")

        status_styles = {
            "configured": "[green]configured[/green]",
            "skipped": "[dim]skipped[/dim]",
            "failed": "[red]failed[/red]",
            "aborted": "[yellow]aborted[/yellow]",
        }
        for project, role, status in rows:
            table.add_row(project, role, status_styles.get(status, status))

        self.console.print(table)
