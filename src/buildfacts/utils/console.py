"""Console utility functions for formatting and output."""

from typing import Iterable, Optional

import click
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from ..models import BuildFact


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'check': '✅',
    'gear': '⚙️',
    'list': '📋',
}

_THEME = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "muted": "dim white",
    "title": "bold cyan",
})

_console = None


def _get_console() -> Console:
    """Get the shared Rich console, created on first use."""
    global _console
    if _console is None:
        _console = Console(theme=_THEME, highlight=False)
    return _console


def _rich_echo(message: str, color: str = "white", bold: bool = False, symbol: Optional[str] = None):
    """Echo message with Rich formatting, plain click output as fallback."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    style = f"bold {color}" if bold else color
    try:
        _get_console().print(message, style=style, markup=False)
    except UnicodeEncodeError:
        # Terminals without emoji support
        click.echo(message.encode("ascii", "replace").decode("ascii"))


def _rich_success(message: str, symbol: Optional[str] = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: Optional[str] = None):
    """Display error message with red color."""
    _rich_echo(message, color="red", symbol=symbol)


def _rich_warning(message: str, symbol: Optional[str] = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: Optional[str] = None):
    """Display info message with blue color."""
    _rich_echo(message, color="blue", symbol=symbol)


def _create_facts_table(facts: Iterable[BuildFact], title: str = "Build Facts") -> Table:
    """Create a Rich table listing build facts grouped by category."""
    table = Table(title=f"📋 {title}", show_header=True, header_style="bold cyan")
    table.add_column("Group", style="magenta")
    table.add_column("Fact", style="bold white")
    table.add_column("Value", style="white", overflow="fold")

    for fact in facts:
        value = fact.display_value()
        value_style = "dim" if fact.value is None or fact.value == () else None
        table.add_row(fact.spec.group.value, fact.name, value, style=value_style)
    return table
