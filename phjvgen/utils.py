"""Console output helpers for phjvgen.

All user-facing output goes through one Rich ``Console``; the helpers below
give each kind of message a consistent colour and prefix.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from phjvgen import __version__

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner() -> None:
    """Print the tool banner."""
    console.print(
        Panel.fit(
            "[bold cyan]Java 25 LTS Layered Project Generator[/bold cyan]\n"
            f"[dim]phjvgen v{__version__}[/dim]",
            border_style="cyan",
        )
    )


def print_section(title: str) -> None:
    """Print a full-width rule with *title*."""
    console.print()
    console.print(Rule(f"[bold cyan]{title}[/bold cyan]", style="cyan"))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_info(message: str) -> None:
    """Print a blue informational message."""
    console.print(f"[bold blue][INFO][/bold blue] {escape(message)}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green][SUCCESS][/bold green] {escape(message)}")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red][ERROR][/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow][WARNING][/bold yellow] {escape(message)}")
