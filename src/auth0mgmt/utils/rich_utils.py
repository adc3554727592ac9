"""Rich utilities: shared console, tracebacks, and resource rendering."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.table import Table
from rich.theme import Theme
from rich.traceback import install as rich_traceback_install

from ..models.base import Resource

_console: Console | None = None


def get_console() -> Console:
    """Return a shared Rich Console instance.

    Creates the console on first use with a pleasant default theme.
    """
    global _console
    if _console is None:
        theme = Theme(
            {
                "info": "cyan",
                "warning": "yellow",
                "error": "red",
                "success": "green",
                "muted": "grey62",
            }
        )
        _console = Console(theme=theme, highlight=False, soft_wrap=False)
    return _console


def install_rich_tracebacks() -> None:
    """Enable rich tracebacks globally for nicer error output."""
    rich_traceback_install(show_locals=False, word_wrap=True, suppress=["click"])


def print_resource(resource: Resource, console: Console | None = None) -> None:
    """Print a single record as JSON, omitting absent fields."""
    (console or get_console()).print_json(json.dumps(resource.to_dict()))


def print_resource_table(
    title: str,
    resources: Iterable[Resource],
    columns: Sequence[str],
    console: Console | None = None,
) -> None:
    """Print records as a table; absent values show as a muted dash."""
    table = Table(title=title)
    for column in columns:
        table.add_column(column)

    count = 0
    for resource in resources:
        cells = []
        for column in columns:
            value = resource.get(column)
            if value is None:
                cells.append("[muted]-[/muted]")
            elif isinstance(value, (list, tuple)):
                cells.append(", ".join(str(v) for v in value))
            else:
                cells.append(str(value))
        table.add_row(*cells)
        count += 1

    console = console or get_console()
    if count:
        console.print(table)
    else:
        console.print(f"[muted]No {title.lower()} found[/muted]")
