"""Snapshot document capturing every buffer plus export metadata.

Purpose
-------
Define the portable export/import document and the normalisation rules that
turn a decoded payload back into ``buffer id -> list of entries``.

Contents
--------
* :class:`Snapshot` dataclass with ``to_dict``/``from_dict`` and JSON helpers.
* :class:`SnapshotFormatError` raised for structurally invalid documents.
* ``SNAPSHOT_VERSION`` constant.

Alignment Notes
---------------
Exports always write lists per buffer. Imports still accept a bare object
(wrapped into a one-element list) and ``null`` (empty list) so documents
produced by serialisers that collapse single-element arrays stay readable.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

from .entry import LogEntry

SNAPSHOT_VERSION = "1.0"


class SnapshotFormatError(ValueError):
    """Raised when a snapshot document is structurally invalid."""


def _normalise_records(value: Any, buffer_id: str) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [value]
    if isinstance(value, list):
        return value
    raise SnapshotFormatError(f"Buffer {buffer_id!r} must hold a list of entry records, got {type(value).__name__}")


@dataclass(slots=True, frozen=True)
class Snapshot:
    """Whole-store export document.

    Examples
    --------
    >>> snap = Snapshot.from_dict({"Buffers": {"default": None}})
    >>> snap.buffers
    {'default': []}
    """

    buffers: dict[str, list[LogEntry]] = field(default_factory=dict)
    version: str = SNAPSHOT_VERSION
    export_date: str = ""
    machine: str = ""
    user: str = ""
    session: str = ""

    @property
    def entry_count(self) -> int:
        return sum(len(items) for items in self.buffers.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "Version": self.version,
            "ExportDate": self.export_date,
            "Machine": self.machine,
            "User": self.user,
            "Session": self.session,
            "Buffers": {buffer_id: [entry.to_dict() for entry in items] for buffer_id, items in self.buffers.items()},
        }

    def to_json(self, *, ensure_ascii: bool = False) -> str:
        """Serialise the snapshot with a stable two-space indentation.

        ``ensure_ascii`` escapes every non-ASCII character, which keeps the
        document lossless when it is written with an ASCII codec.

        Examples
        --------
        >>> Snapshot(session="café").to_json(ensure_ascii=True).isascii()
        True
        """

        return json.dumps(self.to_dict(), indent=2, ensure_ascii=ensure_ascii)

    @classmethod
    def from_dict(cls, payload: Any) -> "Snapshot":
        """Parse a decoded document, normalising every buffer to a list.

        Raises
        ------
        SnapshotFormatError
            When the document is not an object, lacks ``Buffers``, or holds an
            entry record that cannot be parsed.
        """

        if not isinstance(payload, Mapping):
            raise SnapshotFormatError("Snapshot document must be an object")
        if "Buffers" not in payload:
            raise SnapshotFormatError("Snapshot document is missing the 'Buffers' field")
        raw_buffers = payload["Buffers"]
        if raw_buffers is None:
            raw_buffers = {}
        if not isinstance(raw_buffers, Mapping):
            raise SnapshotFormatError("'Buffers' must map buffer ids to entry lists")

        buffers: dict[str, list[LogEntry]] = {}
        for buffer_id, value in raw_buffers.items():
            records = _normalise_records(value, buffer_id)
            try:
                buffers[str(buffer_id)] = [LogEntry.from_dict(record, buffer_id=str(buffer_id)) for record in records]
            except (TypeError, ValueError) as exc:
                raise SnapshotFormatError(f"Invalid entry in buffer {buffer_id!r}: {exc}") from exc

        return cls(
            buffers=buffers,
            version=str(payload.get("Version") or SNAPSHOT_VERSION),
            export_date=str(payload.get("ExportDate") or ""),
            machine=str(payload.get("Machine") or ""),
            user=str(payload.get("User") or ""),
            session=str(payload.get("Session") or ""),
        )

    @classmethod
    def from_json(cls, text: str) -> "Snapshot":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SnapshotFormatError(f"Snapshot is not valid JSON: {exc}") from exc
        return cls.from_dict(payload)


__all__ = ["SNAPSHOT_VERSION", "Snapshot", "SnapshotFormatError"]
