#!/usr/bin/env python3
"""
UI components for the objwriter CLI.

This module provides the themed console and the helpers used to print
messages and tables consistently across commands.
"""

import logging
from typing import List, Dict, Any, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

logger = logging.getLogger(__name__)

objwriter_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "filename": "bold blue",
    "value": "green",
    "header": "bold magenta",
})

console = Console(theme=objwriter_theme)


def print_rich_table(data: List[Dict[str, Any]], title: str,
                     columns: Optional[List[Tuple[str, str]]] = None) -> None:
    """
    Print data as a rich table.

    Args:
        data: List of dictionaries with row data.
        title: Table title.
        columns: Optional list of (column_name, style) tuples.
    """
    table = Table(title=Text(title))

    if not columns:
        columns = [(key, "cyan") for key in data[0].keys()] if data else []

    for name, style in columns:
        table.add_column(name, style=style)

    for row in data:
        # Cells hold user data (object names), never markup
        table.add_row(*[Text(str(row.get(col[0], ""))) for col in columns])

    console.print(table)


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[warning]Warning:[/warning] {escape(message)}")


def print_error(message: str) -> None:
    """
    Print an error message.

    Args:
        message: Error message text
    """
    console.print(f"[error]Error:[/error] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]✓[/success] {message}")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[info]{message}[/info]")
