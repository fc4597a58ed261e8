"""Rule table rendering for the "actions" command."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.rules_engine import Configuration


def format_actions(configuration: Configuration) -> Table:
    """Return the configured actions as a two-column table."""

    table = Table(show_lines=False)
    table.add_column("TRIGGER", no_wrap=True)
    table.add_column("RUN")
    for action in configuration.actions:
        # Text() keeps regex brackets from being read as console markup.
        table.add_row(Text(str(action.trigger)), Text(action.run))
    return table


def print_actions(configuration: Configuration, console: Optional[Console] = None) -> None:
    (console or Console()).print(format_actions(configuration))
