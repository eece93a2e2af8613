from __future__ import annotations

from rich.console import Console
from rich.text import Text

NO_ARGS_HELP = "No arguments given. Get help elsewhere pls."

BANNER = r"""
     _   _                 _      _   _
  __| | (_) __   __   ___ | | __ (_) | |_
 / _` | | | \ \ / /  / _ \| |/ / | | | __|
| (_| | | |  \ V /  |  __/|   <  | | | |_
 \__,_| |_|   \_/    \___||_|\_\ |_|  \__|
"""


class CliVisuals:
    """Human-facing status output. Never inspects program state."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print_header(self) -> None:
        if self.console.is_terminal:
            self.console.clear()
        self.console.print(Text(BANNER.strip("\n"), style="bold green"))

    def print_success(self, message: str) -> None:
        self.console.print(Text(str(message), style="green"))

    def print_error(self, message: str) -> None:
        self.console.print(Text(str(message), style="red"))

    def print_no_args_help(self) -> None:
        self.console.print(Text(NO_ARGS_HELP))
