"""Console helpers for projo.

All user-facing output goes through the module-level Rich ``console`` so the
library modules stay silent and the CLI owns presentation.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.rule import Rule
from rich.table import Table
from rich.tree import Tree

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print a full-width rule with *title* in the middle."""
    console.print()
    console.print(Rule(f"[bold bright_cyan] {title} [/bold bright_cyan]", style="bright_cyan"))
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
        table.add_row(key, str(value))
    console.print(table)
    console.print()


def print_tree(root: Path, paths: list[Path] | tuple[Path, ...]) -> None:
    """Print *paths* as a tree relative to *root*."""
    tree = Tree(f"[bold]{root}[/bold]")
    nodes: dict[tuple[str, ...], Tree] = {(): tree}
    for path in sorted(paths):
        parts = path.relative_to(root).parts
        for depth in range(1, len(parts) + 1):
            key = parts[:depth]
            if key not in nodes:
                nodes[key] = nodes[key[:-1]].add(parts[depth - 1])
    console.print(tree)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def confirm(question: str, default: bool = False) -> bool:
    """Ask a yes/no question on the console."""
    return Confirm.ask(question, default=default, console=console)
