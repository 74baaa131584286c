"""Configuration commands.

Show the effective engine configuration or write a default config file.
"""

from typing import Annotated

import typer
from rich.table import Table

from filepilot.cli.types import get_config
from filepilot.core.config import ConfigError, EngineConfig, save_config
from filepilot.core.paths import ensure_config_dir, get_config_path
from filepilot.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config = get_config()
    path = get_config_path()

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")

    table.add_row("search_debounce_ms", str(config.search_debounce_ms))
    table.add_row("rename_collision", config.rename_collision)
    table.add_row("new_folder_name", config.new_folder_name)
    table.add_row(
        "terminal_command",
        " ".join(config.terminal_command) if config.terminal_command else "[muted](platform default)[/]",
    )
    table.add_row(
        "start_directory",
        str(config.start_directory) if config.start_directory else "[muted](working directory)[/]",
    )

    console.print(table)
    source = path if path.exists() else "defaults (no config file)"
    console.print(f"\n[dim]Source: {source}[/dim]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = get_config_path()
    if path.exists() and not force:
        print_info(f"Config already exists: {path} (use --force to overwrite)")
        return

    try:
        ensure_config_dir()
        saved = save_config(EngineConfig(), path)
    except (ConfigError, RuntimeError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    print_success(f"Wrote default config to {saved}")
