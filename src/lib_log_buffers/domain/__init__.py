"""Domain entities and value objects used by the buffered logging engine."""

from __future__ import annotations

from .buffer_store import BufferStore
from .categories import LogCategory, SeverityThreshold, SeverityTier
from .config import DEFAULT_CONFIG, LogConfig, build_config
from .encoding import FileEncoding
from .entry import DEFAULT_BUFFER_ID, TIMESTAMP_FORMAT, LogEntry
from .query import EntryFilter
from .snapshot import Snapshot, SnapshotFormatError
from .summary import LogSummary, summarize

__all__ = [
    "BufferStore",
    "DEFAULT_BUFFER_ID",
    "DEFAULT_CONFIG",
    "EntryFilter",
    "FileEncoding",
    "LogCategory",
    "LogConfig",
    "LogEntry",
    "LogSummary",
    "SeverityThreshold",
    "SeverityTier",
    "Snapshot",
    "SnapshotFormatError",
    "TIMESTAMP_FORMAT",
    "build_config",
    "summarize",
]
