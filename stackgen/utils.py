"""Shared console helpers for stackgen.

Provides the Rich console used by the command-line front end, colour-coded
status messages, summary tables, and logging setup.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from stackgen.models import GeneratedFile, ProjectStructure

console = Console()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(level: str = "WARNING") -> None:
    """Route stdlib logging through a ``RichHandler`` at *level*."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_size(num_bytes: int) -> str:
    """Format a byte count for display.

    Examples::

        format_size(512)   -> "512 B"
        format_size(2048)  -> "2.0 KB"
    """
    if num_bytes < 1024:
        return f"{num_bytes} B"
    return f"{num_bytes / 1024:.1f} KB"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


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
        table.add_row(key, escape(str(value)))

    console.print(table)
    console.print()


def print_file_table(structure: ProjectStructure) -> None:
    """Print one row per generated file: path, language and size."""
    table = Table(
        title=f"{escape(structure.project_name)} ({len(structure)} files)",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Language", style="magenta")
    table.add_column("Size", justify="right", style="dim")

    for generated in structure.files:
        table.add_row(escape(generated.path), generated.language, format_size(generated.size))

    console.print(table)


def print_file(generated: GeneratedFile) -> None:
    """Print a file's content with syntax highlighting."""
    console.rule(escape(generated.path))
    console.print(Syntax(generated.content, generated.language, line_numbers=True))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")



def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
