"""Shared utility functions for dockgen.

Provides name and command-line helpers used by the renderer, a shallow
directory listing for the caller layer, and Rich-based console output.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def to_service_name(name: str, fallback: str = "app") -> str:
    """Convert a directory base name to a Compose service name.

    * Lowercases the input.
    * Replaces every character outside ``[a-z0-9]`` with a hyphen, one
      hyphen per character (runs are *not* collapsed).
    * Returns *fallback* when nothing alphanumeric is left.

    Examples::

        to_service_name("My App!2")  -> "my-app-2"
        to_service_name("web_api")   -> "web-api"
        to_service_name("!!!")       -> "app"
    """
    result = re.sub(r"[^a-z0-9]", "-", name.lower())
    if not re.search(r"[a-z0-9]", result):
        return fallback
    return result


def first_token(command: str | None, default: str) -> str:
    """Return the first whitespace-delimited token of *command*.

    Falls back to the first token of *default* when *command* is missing
    or blank.

    Examples::

        first_token("nodemon --watch src index.js", "node server.js") -> "nodemon"
        first_token(None, "react-scripts build")                       -> "react-scripts"
    """
    tokens = (command or "").split()
    if tokens:
        return tokens[0]
    return default.split()[0]


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def list_directory(path: str | Path) -> list[str]:
    """Return the sorted names of the immediate entries of *path*.

    Non-recursive: files and sub-directories alike, names only.
    """
    return sorted(entry.name for entry in Path(path).iterdir())


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
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_lines(lines: Iterable[str], style: str = "dim") -> None:
    """Print each line indented under the previous message."""
    for line in lines:
        console.print(f"  [{style}]{escape(line)}[/{style}]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
