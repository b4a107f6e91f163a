"""Command-line front door for quickexplorer.

Builds one explorer session (config store, workspace, navigation state and
row projector), then either prints the listing once or runs a line-oriented
command loop over stdin.
"""

from __future__ import annotations

import argparse
import locale
import logging
import sys
from pathlib import Path
from typing import TextIO

from .host import LoggingNotifier, Notifier, RecordingNotifier, StaticWorkspace
from .render import format_notice, render_listing
from .runtime import ExplorerCommands, NavigationState
from .runtime.config import JsonConfigStore
from .sort_order import CONFIG_STRINGS, string_to_sort_order
from .tree_pane import ViewProjector
from .ui_theme import UITheme, available_theme_names, resolve_theme

HELP_TEXT = """commands:
  cd <path>   enter a directory (relative to the current one)
  up          go to the parent directory
  open <path> print the absolute path of a file for an editor to pick up
  sort        cycle the sort order
  refresh     re-read the current directory
  ls          list the current directory again
  pwd         print the current directory
  help        show this help
  quit        leave
"""


class ExplorerSession:
    """Terminal host wiring: redraws whenever the navigation state goes stale."""

    def __init__(
        self,
        state: NavigationState,
        notifier: RecordingNotifier,
        theme: UITheme,
        out: TextIO,
    ) -> None:
        self.state = state
        self.notifier = notifier
        self.theme = theme
        self.out = out
        self.projector = ViewProjector(state, notifier)
        self.commands = ExplorerCommands(
            state,
            notifier,
            on_title_changed=self._set_title,
            on_open_file=self._open_file,
        )
        self.title = self.commands.title()
        self.stale = True
        self.projector.on_did_change(self._mark_stale)

    def _set_title(self, title: str) -> None:
        self.title = title

    def _open_file(self, path: Path) -> None:
        self.out.write(f"{path.resolve()}\n")

    def _mark_stale(self) -> None:
        self.stale = True

    def flush_notices(self) -> None:
        for level, message in self.notifier.drain():
            self.out.write(format_notice(level, message, self.theme) + "\n")

    def draw(self) -> None:
        rows = self.projector.get_children()
        self.flush_notices()
        self.out.write(render_listing(self.title, rows, self.theme))
        self.stale = False

    def _target_path(self, argument: str) -> Path:
        target = Path(argument).expanduser()
        if not target.is_absolute():
            target = self.state.current_directory / target
        return target

    def handle(self, line: str) -> bool:
        """Run one command line; returns ``False`` when the loop should stop."""
        name, _, argument = line.strip().partition(" ")
        argument = argument.strip()
        if not name:
            return True
        if name in {"quit", "exit", "q"}:
            return False

        if name == "cd":
            if not argument:
                self.notifier.warning("Usage: cd <path>")
            else:
                self.commands.change_directory(self._target_path(argument))
        elif name == "up":
            self.commands.go_up()
        elif name == "open":
            if not argument:
                self.notifier.warning("Usage: open <path>")
            else:
                self.commands.open_file(self._target_path(argument))
        elif name == "sort":
            self.commands.toggle_sort_order()
        elif name == "refresh":
            self.commands.refresh()
        elif name == "ls":
            self.stale = True
        elif name == "pwd":
            self.out.write(f"{self.state.current_directory}\n")
        elif name == "help":
            self.out.write(HELP_TEXT)
        else:
            self.notifier.error(f"Unknown command: {name}")

        if self.stale:
            self.draw()
        else:
            self.flush_notices()
        return True

    def run(self, lines: TextIO) -> None:
        self.draw()
        for line in lines:
            if not self.handle(line):
                break


def print_listing(state: NavigationState, notifier: Notifier, theme: UITheme, out: TextIO) -> None:
    """Write the title and rows for the current directory once."""
    projector = ViewProjector(state, notifier)
    title = ExplorerCommands(state, notifier).title()
    out.write(render_listing(title, projector.get_children(), theme))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and open an explorer session.

    ``default_path`` is primarily for tests; when omitted the current working
    directory acts as the workspace root.
    """
    parser = argparse.ArgumentParser(description="Browse one directory at a time, never above the project root.")
    parser.add_argument("path", nargs="?", default=None, help="Workspace root. Defaults to current directory.")
    parser.add_argument(
        "--sort",
        choices=CONFIG_STRINGS,
        default=None,
        help="Sort order for this session (default: configured defaultSortOrder).",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to the JSON config file.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--list", action="store_true", help="Print the listing once and exit.")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")
    args = parser.parse_args()

    _configure_logging(args.verbose)
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        pass

    if default_path is None:
        default_path = Path.cwd()
    workspace_path = Path(args.path).expanduser() if args.path else default_path
    if not workspace_path.is_dir():
        raise SystemExit(f"Not a directory: {workspace_path}")

    no_color = args.no_color or not sys.stdout.isatty()
    theme = resolve_theme(args.theme, no_color=no_color)
    # One-shot listings keep stdout clean: notices go to the log on stderr.
    notifier = LoggingNotifier() if args.list else RecordingNotifier()
    state = NavigationState.create(
        JsonConfigStore(args.config),
        StaticWorkspace(workspace_path.resolve()),
        notifier,
        sort_order=string_to_sort_order(args.sort) if args.sort else None,
    )

    if args.list:
        print_listing(state, notifier, theme, sys.stdout)
        return
    ExplorerSession(state, notifier, theme, sys.stdout).run(sys.stdin)
