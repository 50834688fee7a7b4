"""File ports used by text export and snapshot persistence.

Purpose
-------
Keep filesystem access behind protocols so use cases can be exercised with
in-memory fakes.

Contents
--------
* :class:`TextWriterPort` – write or append encoded text.
* :class:`TextReaderPort` – read encoded text back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from lib_log_buffers.domain.encoding import FileEncoding


@runtime_checkable
class TextWriterPort(Protocol):
    """Persist ``content`` to ``path``.

    When ``append`` is ``True`` and ``path`` already holds data, a line
    separator is inserted before ``content``.
    """

    def write(self, path: Path, content: str, *, encoding: FileEncoding, append: bool = False) -> None: ...


@runtime_checkable
class TextReaderPort(Protocol):
    """Load text from ``path``, detecting byte-order marks."""

    def read(self, path: Path) -> str: ...


__all__ = ["TextReaderPort", "TextWriterPort"]
