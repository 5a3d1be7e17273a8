"""Command-line interface for objwriter."""

from objwriter.cli.app import app, create_app

__all__ = ['app', 'create_app']
