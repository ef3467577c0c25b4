"""Console session used by the create workflow.

The creator only needs four things from its host: whether the session is
interactive, a greeting, a way to log a line, and a way to ask a question.
:class:`Session` describes that surface; :class:`CliSession` implements it on
top of a Rich console.
"""

from __future__ import annotations

from typing import Optional, Protocol

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from .utils import console as default_console

GREETING = r"""
 _______                             __
|   _   .-----.----.--.--.-----.----|  .-----.-----.-----.
|   |___|  -__|   _|  |  |  -__|   _|  |  -__|__ --|__ --|
|____   |_____|__|  \___/|_____|__| |__|_____|_____|_____|
|   |   |
|       |  Create a new service
`-------'
"""


class Session(Protocol):
    """Host services consumed by :class:`~svcscaffold.creator.ServiceCreator`."""

    interactive: bool

    def display_greeting(self) -> None: ...

    def log(self, message: str) -> None: ...

    def ask(self, label: str, default: Optional[str] = None) -> str: ...


class CliSession:
    """Rich-backed terminal session."""

    def __init__(self, interactive: bool = False, console: Optional[Console] = None) -> None:
        self.interactive = interactive
        self.console = console or default_console

    def display_greeting(self) -> None:
        self.console.print(Panel(GREETING, border_style="bright_yellow", expand=False))

    def log(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def ask(self, label: str, default: Optional[str] = None) -> str:
        """Ask for a value on the terminal and return the answer."""
        if default is None:
            return Prompt.ask(label, console=self.console)
        return Prompt.ask(label, console=self.console, default=default)
