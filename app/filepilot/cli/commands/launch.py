"""Launcher commands.

Open a path in its default application or a terminal at a directory.
Both return as soon as the process has been started.
"""

from pathlib import Path
from typing import Annotated

import typer

from filepilot.cli.types import get_config
from filepilot.launchers import get_launcher
from filepilot.utils.formatting import print_error, print_success


def open_path(
    path: Annotated[Path, typer.Argument(help="File or directory to open.")],
) -> None:
    """Open PATH with the default application."""
    target = path.expanduser().absolute()
    launcher = get_launcher(terminal_command=get_config().terminal_command)

    if not launcher.open(target):
        print_error(f"Could not open {target}")
        raise typer.Exit(code=1)
    print_success(f"Opened {target}")


def terminal(
    path: Annotated[
        Path,
        typer.Argument(help="Directory to open the terminal at."),
    ] = Path("."),
) -> None:
    """Open a terminal at PATH (a file opens at its folder)."""
    target = path.expanduser().absolute()
    launcher = get_launcher(terminal_command=get_config().terminal_command)

    if not launcher.open_terminal(target):
        print_error(f"Could not open a terminal at {target}")
        raise typer.Exit(code=1)
    print_success(f"Opened terminal at {target if target.is_dir() else target.parent}")
