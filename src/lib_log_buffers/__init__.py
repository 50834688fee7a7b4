"""Public package surface of the buffered structured-logging engine.

Importing :mod:`lib_log_buffers` gives access to the process-wide façade
(``write_log``, ``get_log_text``, ``get_log_summary`` …), the
:class:`BufferedLogger` context object for hosts that want independent
loggers, and the domain types callers pass around.
"""

from __future__ import annotations

from .domain import (
    DEFAULT_BUFFER_ID,
    TIMESTAMP_FORMAT,
    FileEncoding,
    LogCategory,
    LogConfig,
    LogEntry,
    LogSummary,
    SeverityThreshold,
    SeverityTier,
    Snapshot,
    SnapshotFormatError,
)
from .runtime import (
    BufferedLogger,
    clear_buffer,
    export_snapshot,
    get_configuration,
    get_log_entries,
    get_log_summary,
    get_log_text,
    get_logger,
    import_snapshot,
    init,
    list_buffer_ids,
    reset_configuration,
    save_log,
    shutdown,
    summary_info,
    write_log,
    write_progress,
)

__all__ = [
    "BufferedLogger",
    "DEFAULT_BUFFER_ID",
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
    "clear_buffer",
    "export_snapshot",
    "get_configuration",
    "get_log_entries",
    "get_log_summary",
    "get_log_text",
    "get_logger",
    "import_snapshot",
    "init",
    "list_buffer_ids",
    "reset_configuration",
    "save_log",
    "shutdown",
    "summary_info",
    "write_log",
    "write_progress",
]
