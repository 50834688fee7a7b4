"""Domain entry describing one recorded log event.

Purpose
-------
Provide an immutable, serialisable representation of log entries stored in
buffers and carried through snapshots.

Contents
--------
* :class:`LogEntry` dataclass with wire helpers.
* ``TIMESTAMP_FORMAT`` plus :func:`format_timestamp` / :func:`parse_timestamp`.
* :func:`render_line` building the timestamp-free storage line.

System Role
-----------
Sits in the domain layer; the recorder creates entries, the query engine and
summary aggregator read them, the snapshot codec (de)serialises them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Mapping

from .categories import LogCategory

TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"
"""Fixed ``day-month-year hour:minute:second`` pattern used for timestamps."""

DEFAULT_BUFFER_ID = "default"


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` using :data:`TIMESTAMP_FORMAT`.

    Examples
    --------
    >>> format_timestamp(datetime(2025, 3, 9, 7, 5, 1))
    '09-03-2025 07:05:01'
    """

    return moment.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Parse a timestamp rendered by :func:`format_timestamp`.

    Raises
    ------
    ValueError
        When ``value`` does not match :data:`TIMESTAMP_FORMAT`.
    """

    return datetime.strptime(value, TIMESTAMP_FORMAT)


def render_line(message: str, category: LogCategory, indentation: str = "") -> str:
    """Return ``indentation + icon + " " + message`` (no icon for ``RAW``).

    Examples
    --------
    >>> render_line("hello", LogCategory.RAW, " | ")
    ' | hello'
    >>> render_line("done", LogCategory.ADD)
    '[+] done'
    """

    if category is LogCategory.RAW:
        return f"{indentation}{message}"
    return f"{indentation}{category.icon} {message}"


def normalise_buffer_ids(buffer_ids: Iterable[str] = ()) -> tuple[str, ...]:
    """Return ``("default", *buffer_ids)`` de-duplicated in first-seen order.

    Examples
    --------
    >>> normalise_buffer_ids(["alerts", "default", "alerts", "audit"])
    ('default', 'alerts', 'audit')
    """

    ordered: dict[str, None] = {DEFAULT_BUFFER_ID: None}
    for buffer_id in buffer_ids:
        if not isinstance(buffer_id, str) or not buffer_id:
            raise ValueError(f"buffer id must be a non-empty string: {buffer_id!r}")
        ordered.setdefault(buffer_id, None)
    return tuple(ordered)


@dataclass(slots=True, frozen=True)
class LogEntry:
    """Immutable log entry stored in one or more buffers.

    Attributes
    ----------
    timestamp:
        Creation time formatted with :data:`TIMESTAMP_FORMAT`. Imported
        entries keep whatever string the snapshot carried.
    level:
        Non-negative indentation depth.
    category:
        :class:`LogCategory` of the entry.
    message:
        Raw caller text.
    rendered_line:
        Indentation, icon and message; never contains the timestamp.
    buffer_ids:
        Buffers the entry was written to.
    """

    timestamp: str
    level: int
    category: LogCategory
    message: str
    rendered_line: str
    buffer_ids: tuple[str, ...] = field(default=(DEFAULT_BUFFER_ID,))

    def __post_init__(self) -> None:
        if not isinstance(self.level, int) or isinstance(self.level, bool) or self.level < 0:
            raise ValueError(f"level must be a non-negative integer, got {self.level!r}")
        if not isinstance(self.category, LogCategory):
            raise ValueError(f"category must be a LogCategory, got {self.category!r}")
        if not self.message or not self.message.strip():
            raise ValueError("message must not be empty")
        object.__setattr__(self, "buffer_ids", tuple(self.buffer_ids))

    def line(self, *, include_timestamp: bool) -> str:
        """Return the rendered line, optionally prefixed by ``[timestamp]``."""

        if include_timestamp:
            return f"[{self.timestamp}] {self.rendered_line}"
        return self.rendered_line

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entry into its snapshot record."""

        return {
            "Timestamp": self.timestamp,
            "Level": self.level,
            "Type": self.category.value,
            "Message": self.message,
            "RenderedLine": self.rendered_line,
            "BufferIds": list(self.buffer_ids),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], *, buffer_id: str = DEFAULT_BUFFER_ID) -> "LogEntry":
        """Reconstruct an entry from :meth:`to_dict` output.

        Missing optional fields fall back to ``Level=0``, ``Type=Raw``, the
        message as rendered line and ``[buffer_id]`` as buffer list.
        """

        if not isinstance(payload, Mapping):
            raise ValueError(f"entry record must be an object, got {type(payload).__name__}")
        try:
            message = payload["Message"]
        except KeyError as exc:
            raise ValueError("entry record is missing 'Message'") from exc
        raw_type = payload.get("Type") or LogCategory.RAW.value
        raw_ids = payload.get("BufferIds")
        if raw_ids is None:
            buffer_ids: tuple[str, ...] = (buffer_id,)
        elif isinstance(raw_ids, str):
            buffer_ids = (raw_ids,)
        else:
            buffer_ids = tuple(str(item) for item in raw_ids)
        return cls(
            timestamp=str(payload.get("Timestamp") or ""),
            level=int(payload.get("Level") or 0),
            category=LogCategory.coerce(raw_type),
            message=str(message),
            rendered_line=str(payload.get("RenderedLine") or message),
            buffer_ids=buffer_ids,
        )


__all__ = [
    "DEFAULT_BUFFER_ID",
    "LogEntry",
    "TIMESTAMP_FORMAT",
    "format_timestamp",
    "normalise_buffer_ids",
    "parse_timestamp",
    "render_line",
]
