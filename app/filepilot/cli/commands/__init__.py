"""CLI commands for filepilot.

This package contains all subcommand implementations.
"""

from filepilot.cli.commands import browse, config, launch, listing, ops

__all__ = ["browse", "config", "launch", "listing", "ops"]
