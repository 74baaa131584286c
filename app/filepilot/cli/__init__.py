"""CLI package for filepilot.

This package contains the Typer application and all subcommands.
"""

from filepilot.cli.main import app

__all__ = ["app"]
