"""Buffered logger owning one buffer store and one live configuration.

Purpose
-------
Bundle the buffer store, the live :class:`LogConfig`, and the adapters into a
single context object. Every public operation is a bound method, so hosts can
run several independent loggers side by side while the module-level façade
keeps one process-wide instance.

Contents
--------
* :class:`BufferedLogger` – composition root for the use cases.

System Role
-----------
Wires the application use cases to concrete adapters (Rich console and
progress, file writer/reader, system clock and identity). Configuration reset
and buffer reset happen together under the configuration lock.
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import RLock
from typing import Any, Iterable

from lib_log_buffers.adapters import (
    RichConsoleAdapter,
    RichProgressAdapter,
    SystemClock,
    SystemIdentityProvider,
    TextFileReader,
    TextFileWriter,
)
from lib_log_buffers.application.ports import (
    ClockPort,
    ConsolePort,
    ProgressPort,
    SystemIdentityPort,
    TextReaderPort,
    TextWriterPort,
)
from lib_log_buffers.application.use_cases import (
    create_build_snapshot,
    create_clear_buffer,
    create_export_snapshot,
    create_get_log_entries,
    create_get_log_summary,
    create_get_log_text,
    create_import_snapshot,
    create_list_buffer_ids,
    create_restore_snapshot,
    create_save_log,
    create_write_log,
)
from lib_log_buffers.application.use_cases._diagnostics import DiagnosticHook, build_diagnostic_emitter
from lib_log_buffers.domain import (
    DEFAULT_BUFFER_ID,
    BufferStore,
    FileEncoding,
    LogCategory,
    LogConfig,
    LogEntry,
    LogSummary,
    SeverityThreshold,
    Snapshot,
    build_config,
)
from lib_log_buffers.domain.query import NO_LEVEL_FILTER

logger = logging.getLogger(__name__)


class BufferedLogger:
    """Context object exposing every buffered-logging operation.

    Parameters
    ----------
    config:
        Initial configuration; defaults to a fresh copy of the template.
    console:
        Console sink; defaults to :class:`RichConsoleAdapter`.
    progress:
        Progress sink; defaults to :class:`RichProgressAdapter` sharing the
        console's Rich ``Console`` when available.
    clock / identity:
        Time and host identity providers.
    writer / reader:
        File adapters used by ``save_log`` and snapshot export/import.
    diagnostic_hook:
        Optional ``(event, payload)`` callback receiving ``recorded``,
        ``cleared``, ``reset``, ``exported``, ``imported`` and
        ``duration_unparseable`` events.

    Examples
    --------
    >>> class Silent:
    ...     def emit(self, line, *, color=None):
    ...         pass
    >>> log = BufferedLogger(console=Silent())
    >>> _ = log.write_log("Start", "Add")
    >>> log.get_log_text(include_timestamp=False)
    '[+] Start'
    """

    def __init__(
        self,
        *,
        config: LogConfig | None = None,
        console: ConsolePort | None = None,
        progress: ProgressPort | None = None,
        clock: ClockPort | None = None,
        identity: SystemIdentityPort | None = None,
        writer: TextWriterPort | None = None,
        reader: TextReaderPort | None = None,
        diagnostic_hook: DiagnosticHook = None,
        store: BufferStore | None = None,
    ) -> None:
        self._lock = RLock()
        self._config = config if config is not None else build_config()
        self._store = store if store is not None else BufferStore()
        self._console = console if console is not None else RichConsoleAdapter()
        if progress is None:
            rich_console = self._console.console if isinstance(self._console, RichConsoleAdapter) else None
            progress = RichProgressAdapter(console=rich_console)
        self._progress = progress
        clock = clock if clock is not None else SystemClock()
        identity = identity if identity is not None else SystemIdentityProvider()
        writer = writer if writer is not None else TextFileWriter()
        reader = reader if reader is not None else TextFileReader()
        self._emit_diagnostic = build_diagnostic_emitter(diagnostic_hook)

        self._write_log = create_write_log(
            store=self._store,
            config=lambda: self.configuration,
            console=self._console,
            clock=clock,
            diagnostic=diagnostic_hook,
        )
        self._get_log_entries = create_get_log_entries(store=self._store)
        self._get_log_text = create_get_log_text(store=self._store)
        self._get_log_summary = create_get_log_summary(store=self._store, diagnostic=diagnostic_hook)
        self._list_buffer_ids = create_list_buffer_ids(store=self._store)
        self._clear_buffer = create_clear_buffer(store=self._store, diagnostic=diagnostic_hook)
        self._save_log = create_save_log(get_log_text=self._get_log_text, writer=writer)
        self._build_snapshot = create_build_snapshot(store=self._store, clock=clock, identity=identity)
        self._restore_snapshot = create_restore_snapshot(store=self._store, diagnostic=diagnostic_hook)
        self._export_snapshot = create_export_snapshot(
            build_snapshot=self._build_snapshot,
            writer=writer,
            diagnostic=diagnostic_hook,
        )
        self._import_snapshot = create_import_snapshot(restore_snapshot=self._restore_snapshot, reader=reader)

    @property
    def configuration(self) -> LogConfig:
        """Return the live configuration."""

        with self._lock:
            return self._config

    @property
    def store(self) -> BufferStore:
        return self._store

    def reset_configuration(self, **overrides: Any) -> LogConfig:
        """Rebuild configuration from the defaults and clear every buffer.

        Only fields named in ``overrides`` differ from the template; a
        ``colors`` override merges into the default colour table.
        """

        fresh = build_config(**overrides)
        with self._lock:
            self._config = fresh
            self._store.clear()
        logger.debug("Configuration reset with overrides %s", sorted(overrides))
        self._emit_diagnostic("reset", {"overrides": sorted(overrides)})
        return fresh

    def write_log(
        self,
        message: str,
        category: LogCategory | str = LogCategory.RAW,
        level: int = 0,
        *,
        show_timestamp: bool | None = None,
        show_console: bool | None = None,
        color: str | None = None,
        no_store: bool = False,
        buffer_ids: Iterable[str] = (),
    ) -> LogEntry:
        """Record ``message`` in ``default`` plus ``buffer_ids``."""

        return self._write_log(
            message,
            category,
            level,
            show_timestamp=show_timestamp,
            show_console=show_console,
            color=color,
            no_store=no_store,
            buffer_ids=buffer_ids,
        )

    def get_log_text(
        self,
        buffer_id: str = DEFAULT_BUFFER_ID,
        *,
        max_level: int = NO_LEVEL_FILTER,
        min_severity: SeverityThreshold | str = SeverityThreshold.ALL,
        include_timestamp: bool = True,
    ) -> str:
        return self._get_log_text(
            buffer_id,
            max_level=max_level,
            min_severity=min_severity,
            include_timestamp=include_timestamp,
        )

    def get_log_entries(
        self,
        buffer_id: str = DEFAULT_BUFFER_ID,
        *,
        max_level: int = NO_LEVEL_FILTER,
        min_severity: SeverityThreshold | str = SeverityThreshold.ALL,
    ) -> list[LogEntry]:
        return self._get_log_entries(buffer_id, max_level=max_level, min_severity=min_severity)

    def get_log_summary(
        self,
        buffer_id: str = DEFAULT_BUFFER_ID,
        *,
        max_level: int = NO_LEVEL_FILTER,
        min_severity: SeverityThreshold | str = SeverityThreshold.ALL,
        as_text: bool = False,
    ) -> LogSummary | str:
        return self._get_log_summary(buffer_id, max_level=max_level, min_severity=min_severity, as_text=as_text)

    def list_buffer_ids(self, exclude: Iterable[str] | str = ()) -> list[str]:
        return self._list_buffer_ids(exclude)

    def clear_buffer(self, buffer_id: str | None = None) -> None:
        self._clear_buffer(buffer_id)

    def save_log(
        self,
        path: str | Path,
        buffer_id: str = DEFAULT_BUFFER_ID,
        *,
        max_level: int = NO_LEVEL_FILTER,
        min_severity: SeverityThreshold | str = SeverityThreshold.ALL,
        include_timestamp: bool = True,
        encoding: FileEncoding | str = FileEncoding.UTF8,
        append: bool = False,
    ) -> bool:
        """Write the filtered buffer to ``path``; ``False`` when nothing matched."""

        return self._save_log(
            path,
            buffer_id,
            max_level=max_level,
            min_severity=min_severity,
            include_timestamp=include_timestamp,
            encoding=encoding,
            append=append,
        )

    def build_snapshot(self, session: str = "") -> Snapshot:
        return self._build_snapshot(session)

    def restore_snapshot(self, snapshot: Snapshot) -> None:
        self._restore_snapshot(snapshot)

    def export_snapshot(
        self,
        path: str | Path,
        *,
        session: str = "",
        encoding: FileEncoding | str = FileEncoding.UTF8_NO_BOM,
    ) -> Snapshot:
        return self._export_snapshot(path, session=session, encoding=encoding)

    def import_snapshot(self, path: str | Path) -> Snapshot:
        return self._import_snapshot(path)

    def write_progress(self, current: int, total: int, label: str = "", progress_id: int = 0) -> int | None:
        """Forward a progress update unless console output is disabled.

        Returns the displayed percentage, or ``None`` when suppressed.
        """

        if not self.configuration.show_console:
            return None
        return self._progress.update(current, total, label=label, progress_id=progress_id)


__all__ = ["BufferedLogger"]
