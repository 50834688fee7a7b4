"""Application use cases composed by the runtime."""

from __future__ import annotations

from .buffers import create_clear_buffer, create_list_buffer_ids
from .query import create_get_log_entries, create_get_log_summary, create_get_log_text
from .record import create_write_log
from .save import create_save_log
from .snapshot import create_build_snapshot, create_export_snapshot, create_import_snapshot, create_restore_snapshot

__all__ = [
    "create_build_snapshot",
    "create_clear_buffer",
    "create_export_snapshot",
    "create_get_log_entries",
    "create_get_log_summary",
    "create_get_log_text",
    "create_import_snapshot",
    "create_list_buffer_ids",
    "create_restore_snapshot",
    "create_save_log",
    "create_write_log",
]
