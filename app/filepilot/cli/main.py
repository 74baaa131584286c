"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from filepilot import __version__
from filepilot.cli.commands import browse, config, launch, listing, ops
from filepilot.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="filepilot",
    help="Browse, search and manage files from the terminal.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"filepilot version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Route filepilot log records to stderr through Rich.

    Args:
        verbose: Show debug records.
        quiet: Show errors only. Ignored when verbose is set.
    """
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR

    handler = RichHandler(console=err_console, show_path=False, show_time=verbose)
    package_logger = logging.getLogger("filepilot")
    package_logger.handlers = [handler]
    package_logger.setLevel(level)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """filepilot - browse, search and manage files from the terminal.

    List directories with recursive sizes, search a tree by filename,
    and copy, paste, rename or delete entries.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose, quiet)


# Register commands
app.command(name="ls")(listing.ls)
app.command(name="search")(listing.find)
app.command(name="size")(listing.size)
app.command(name="usage")(listing.usage)
app.command(name="copy")(ops.copy)
app.command(name="rm")(ops.rm)
app.command(name="rename")(ops.rename)
app.command(name="mkdir")(ops.mkdir)
app.command(name="open")(launch.open_path)
app.command(name="terminal")(launch.terminal)
app.command(name="browse")(browse.browse)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
