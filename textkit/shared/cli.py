"""Console output helpers shared by the command-line tools."""

import functools
import sys
from pathlib import Path
from typing import Any, Callable, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from textkit.stats import text_stats

console = Console()
err_console = Console(stderr=True)


def info(message: str) -> None:
    """Print an informational message."""
    err_console.print(f"[cyan]ℹ[/cyan] {escape(message)}")


def success(message: str) -> None:
    """Print a success message."""
    err_console.print(f"[green]✓[/green] {escape(message)}")


def warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[yellow]⚠[/yellow] {escape(message)}")


def error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[bold red]✗[/bold red] {escape(message)}")


def create_table(title: Optional[str] = None, *columns: str) -> Table:
    """
    Create a rich table with the standard style.

    Args:
        title: Table title
        columns: Column headers to add

    Returns:
        Table instance
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column)
    return table


def print_table(table: Table) -> None:
    """Print a table to the console."""
    console.print(table)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for CLI entry points.

    Lets click and SystemExit pass through, turns Ctrl-C into exit code 130
    and any other unexpected exception into an error message and exit code 1.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (SystemExit, click.exceptions.Exit, click.ClickException, click.Abort):
            raise
        except KeyboardInterrupt:
            warning("Interrupted")
            sys.exit(130)
        except Exception as e:
            error(f"Unexpected error: {e}")
            sys.exit(1)

    return wrapper


def read_input(input_file: Optional[Path]) -> str:
    """
    Read tool input from a file, or from stdin when no file is given.

    Args:
        input_file: Path to read, or None for stdin

    Returns:
        Input text
    """
    if input_file is None:
        return click.get_text_stream("stdin").read()
    with open(input_file, "r", encoding="utf-8") as f:
        return f.read()


def write_output(text: str, output: Optional[Path]) -> None:
    """
    Write tool output to a file, or print it to stdout.

    Args:
        text: Output text
        output: Destination file, or None for stdout
    """
    if output is None:
        click.echo(text)
        return
    with open(output, "w", encoding="utf-8") as f:
        f.write(text)
    success(f"Written to {output}")


def print_stats(text: str) -> None:
    """Print line and character counts of the input."""
    stats = text_stats(text)
    table = create_table(None, "Lines", "Chars")
    table.add_row(f"{stats.lines:,}", f"{stats.chars:,}")
    err_console.print(table)
