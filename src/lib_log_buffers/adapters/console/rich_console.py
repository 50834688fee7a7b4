"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Print rendered log lines through Rich so per-category colours from the live
configuration (or per-call overrides) reach the terminal.

Contents
--------
* :class:`RichConsoleAdapter` - adapter constructed by the runtime.

System Role
-----------
Primary human-facing sink. ``None`` colours fall back to the console default;
``no_color`` strips styling entirely.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from lib_log_buffers.application.ports.console import ConsolePort


class RichConsoleAdapter(ConsolePort):
    """Render log lines using Rich styles."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Configure the console adapter with colour overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, line: str, *, color: str | None = None) -> None:
        """Print ``line`` styled with ``color``.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> adapter = RichConsoleAdapter(console=console)
        >>> adapter.emit('[+] msg', color='green')
        >>> '[+] msg' in console.export_text()
        True
        """
        style = color if color and not self._no_color else ""
        self._console.print(Text(line, style=style), markup=False, highlight=False, soft_wrap=True)


__all__ = ["RichConsoleAdapter"]
