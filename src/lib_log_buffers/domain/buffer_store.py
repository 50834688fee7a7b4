"""Named buffers holding ordered log entries.

Purpose
-------
Provide the in-memory store behind every read and write operation: a mapping
from buffer identifier to an append-only list of :class:`LogEntry` objects.

Contents
--------
* :class:`BufferStore` with append, enumeration, clearing and wholesale
  replacement helpers.

System Role
-----------
Central mutable state of a :class:`~lib_log_buffers.runtime.BufferedLogger`.
One re-entrant lock covers every read-modify-write sequence so import
replacement never interleaves with appends.
"""

from __future__ import annotations

from threading import RLock
from typing import Iterable, Mapping, Sequence

from .entry import LogEntry


class BufferStore:
    """Mapping of buffer identifiers to ordered entry lists."""

    def __init__(self, buffers: Mapping[str, Iterable[LogEntry]] | None = None) -> None:
        self._lock = RLock()
        self._buffers: dict[str, list[LogEntry]] = {}
        if buffers:
            self.replace(buffers)

    def ensure(self, buffer_ids: Iterable[str]) -> None:
        """Create an empty list for every id not yet known."""

        with self._lock:
            for buffer_id in buffer_ids:
                self._buffers.setdefault(buffer_id, [])

    def append(self, entry: LogEntry, buffer_ids: Sequence[str] | None = None) -> None:
        """Append ``entry`` to each target buffer (defaults to ``entry.buffer_ids``)."""

        targets = entry.buffer_ids if buffer_ids is None else buffer_ids
        with self._lock:
            for buffer_id in targets:
                self._buffers.setdefault(buffer_id, []).append(entry)

    def entries(self, buffer_id: str) -> list[LogEntry]:
        """Return a copy of the entries in ``buffer_id`` (empty when unknown)."""

        with self._lock:
            return list(self._buffers.get(buffer_id, ()))

    def buffer_ids(self) -> list[str]:
        """Return sorted ids of buffers holding at least one entry."""

        with self._lock:
            return sorted(buffer_id for buffer_id, items in self._buffers.items() if items)

    def known_ids(self) -> list[str]:
        """Return sorted ids of every buffer, including empty ones."""

        with self._lock:
            return sorted(self._buffers)

    def clear(self, buffer_id: str | None = None) -> None:
        """Empty ``buffer_id`` or, when omitted, forget every buffer."""

        with self._lock:
            if buffer_id is None:
                self._buffers.clear()
            else:
                self._buffers[buffer_id] = []

    def replace(self, buffers: Mapping[str, Iterable[LogEntry]]) -> None:
        """Swap the whole store for ``buffers`` in one locked step."""

        fresh = {buffer_id: list(items) for buffer_id, items in buffers.items()}
        with self._lock:
            self._buffers = fresh

    def snapshot(self) -> dict[str, list[LogEntry]]:
        """Return a copy of the full mapping, preserving entry order."""

        with self._lock:
            return {buffer_id: list(items) for buffer_id, items in self._buffers.items()}

    def __contains__(self, buffer_id: object) -> bool:
        with self._lock:
            return buffer_id in self._buffers

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffers)


__all__ = ["BufferStore"]
