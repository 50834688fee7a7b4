"""Console port describing terminal emission contracts.

Purpose
-------
Define the abstraction for adapters that print rendered log lines, letting the
recorder depend on a narrow protocol instead of Rich.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol with a single ``emit``
  method accepting an optional colour token.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Print a rendered line to an interactive console.

    ``color`` is a style token understood by the adapter; ``None`` means the
    console's default colour.
    """

    def emit(self, line: str, *, color: str | None = None) -> None:
        """Render ``line`` using ``color`` when provided."""


__all__ = ["ConsolePort"]
