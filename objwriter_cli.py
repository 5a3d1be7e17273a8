#!/usr/bin/env python3
"""objwriter Command-Line Interface"""
import logging
import sys

from rich.console import Console

# Initialize console
console = Console()

try:
    from objwriter.cli import app
except ImportError as e:
    console.print(f"[red]Error importing objwriter modules: {e}[/red]")
    console.print("[yellow]Make sure objwriter is properly installed[/yellow]")
    sys.exit(1)


def main():
    """Run the objwriter CLI application."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)

if __name__ == "__main__":
    sys.exit(main())
