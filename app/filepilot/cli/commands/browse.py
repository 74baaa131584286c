"""Interactive browsing session.

Drives a single EngineState from a prompt loop, the way a graphical
front-end would: every command maps onto one engine entry point and
the visible listing is redrawn afterwards.
"""

import shlex
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from rich.prompt import Prompt

from filepilot.browser.models import NavigationOutcome
from filepilot.browser.state import EngineState
from filepilot.cli.display import create_entries_table, print_copy_report, print_operation_result
from filepilot.cli.types import create_state
from filepilot.utils.formatting import (
    console,
    format_disk_usage,
    print_error,
    print_info,
    print_success,
    print_warning,
)

HELP_TEXT = """\
[bold_header]Commands[/]
  ls                    redraw the listing
  cd <dir>              change directory (name, relative or absolute path)
  up                    go to the parent directory
  select <name>         select an entry
  copy [name]           put an entry (default: selection) on the clipboard
  paste                 paste the clipboard into the current directory
  rm [name]             delete an entry (default: selection)
  rename [name] <new>   rename an entry (default: selection)
  mkdir [name]          create a folder
  find [query]          search below the current directory (no query ends the search)
  open [name]           open an entry with its default application
  term [name]           open a terminal here or at an entry
  du                    show disk usage
  help                  show this help
  quit                  leave the session"""


class BrowserSession:
    """Prompt loop around an EngineState.

    Args:
        state: Engine state to drive.
    """

    def __init__(self, state: EngineState) -> None:
        self.state = state
        self._running = True
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "ls": self._cmd_ls,
            "cd": self._cmd_cd,
            "up": self._cmd_up,
            "select": self._cmd_select,
            "copy": self._cmd_copy,
            "paste": self._cmd_paste,
            "rm": self._cmd_rm,
            "rename": self._cmd_rename,
            "mkdir": self._cmd_mkdir,
            "find": self._cmd_find,
            "open": self._cmd_open,
            "term": self._cmd_term,
            "du": self._cmd_du,
            "help": self._cmd_help,
            "quit": self._cmd_quit,
            "exit": self._cmd_quit,
        }

    def run(self) -> None:
        """Read and execute commands until quit or end of input."""
        self.render()
        while self._running:
            try:
                line = Prompt.ask(f"[header]{self.state.current_dir}[/]")
            except (EOFError, KeyboardInterrupt):
                break
            self.execute(line)

    def execute(self, line: str) -> None:
        """Execute one command line."""
        try:
            words = shlex.split(line)
        except ValueError as e:
            print_error(f"Cannot parse command: {e}")
            return
        if not words:
            return

        handler = self._handlers.get(words[0])
        if handler is None:
            print_error(f"Unknown command: {words[0]} (type 'help')")
            return
        handler(words[1:])

    def render(self) -> None:
        """Draw the visible listing with selection and clipboard markers."""
        state = self.state
        if state.search_query:
            title = f"Matches for '{state.search_query}' in {state.current_dir}"
            root: Path | None = state.current_dir
        else:
            title = str(state.current_dir)
            root = None

        console.print(
            create_entries_table(
                state.visible_entries,
                title=title,
                root=root,
                selected=state.selected_file,
                clipboard=state.clipboard,
            )
        )
        console.print(f"[dim]{format_disk_usage(*state.disk_usage())}[/dim]")
        if state.selected_file is not None:
            console.print(f"[dim]Selected: {state.selected_file}[/dim]")
        if state.clipboard is not None:
            console.print(f"[dim]Clipboard: {state.clipboard}[/dim]")

    def resolve(self, name: str) -> Path:
        """Turn a name typed at the prompt into a path.

        Absolute paths pass through; anything else is taken relative
        to the current directory.
        """
        path = Path(name).expanduser()
        if path.is_absolute():
            return path
        return self.state.current_dir / path

    def _target(self, args: list[str]) -> Path | None:
        """Pick the named entry, or the selection when no name is given."""
        if args:
            return self.resolve(args[0])
        if self.state.selected_file is None:
            print_warning("Nothing selected.")
        return self.state.selected_file

    # === Command handlers ===

    def _cmd_ls(self, _args: list[str]) -> None:
        self.state.refresh()
        self.render()

    def _cmd_cd(self, args: list[str]) -> None:
        if not args:
            print_error("Usage: cd <dir>")
            return
        if self.state.navigate(Path(args[0])) == NavigationOutcome.REJECTED:
            print_warning(f"Not a directory: {args[0]}")
            return
        self.render()

    def _cmd_up(self, _args: list[str]) -> None:
        if self.state.navigate_up() == NavigationOutcome.REJECTED:
            print_warning("Already at the top.")
            return
        self.render()

    def _cmd_select(self, args: list[str]) -> None:
        if not args:
            print_error("Usage: select <name>")
            return
        if not self.state.select(self.resolve(args[0])):
            print_warning(f"No such entry: {args[0]}")
            return
        self.render()

    def _cmd_copy(self, args: list[str]) -> None:
        target = self._target(args)
        if target is None:
            return
        if not (target.exists() or target.is_symlink()):
            print_warning(f"No such entry: {target}")
            return
        self.state.copy_to_clipboard(target)
        print_info(f"Copied {target.name} to clipboard.")

    def _cmd_paste(self, _args: list[str]) -> None:
        report = self.state.paste()
        if report is None:
            print_warning("Clipboard is empty.")
            return
        print_copy_report(report)
        self.render()

    def _cmd_rm(self, args: list[str]) -> None:
        target = self._target(args)
        if target is None:
            return
        result = self.state.delete(target)
        print_operation_result(result, f"Deleted {target.name}")
        self.render()

    def _cmd_rename(self, args: list[str]) -> None:
        if len(args) >= 2:
            target: Path | None = self.resolve(args[0])
            new_name = args[1]
        elif len(args) == 1:
            target = self._target([])
            new_name = args[0]
        else:
            print_error("Usage: rename [name] <new>")
            return
        if target is None:
            return

        result = self.state.rename(target, new_name)
        print_operation_result(result, f"Renamed {target.name} to {new_name}")
        if result.success:
            self.render()

    def _cmd_mkdir(self, args: list[str]) -> None:
        result = self.state.create_directory(args[0] if args else None)
        print_operation_result(result, f"Created {result.path.name}")
        if result.success:
            self.render()

    def _cmd_find(self, args: list[str]) -> None:
        self.state.update_search(" ".join(args))
        self.render()

    def _cmd_open(self, args: list[str]) -> None:
        target = self._target(args)
        if target is None:
            return
        if self.state.open_path(target):
            print_success(f"Opened {target.name}")
        else:
            print_error(f"Could not open {target}")

    def _cmd_term(self, args: list[str]) -> None:
        target = self.resolve(args[0]) if args else None
        if self.state.open_terminal(target):
            print_success("Opened terminal.")
        else:
            print_error("Could not open a terminal.")

    def _cmd_du(self, _args: list[str]) -> None:
        console.print(format_disk_usage(*self.state.disk_usage()))

    def _cmd_help(self, _args: list[str]) -> None:
        console.print(HELP_TEXT)

    def _cmd_quit(self, _args: list[str]) -> None:
        self._running = False


def browse(
    path: Annotated[
        Path | None,
        typer.Argument(help="Directory to start in (default: configured start or cwd)."),
    ] = None,
) -> None:
    """Browse interactively: navigate, search, copy, paste, rename and delete."""
    state = create_state(path)
    BrowserSession(state).run()
