"""Use case recording a log entry into one or more buffers.

Purpose
-------
Turn a caller message into a :class:`LogEntry`, echo it to the console sink,
and append it to every target buffer.

Contents
--------
* :func:`create_write_log` factory returning the runtime callable.

System Role
-----------
Application-layer orchestrator wired by
:class:`~lib_log_buffers.runtime.BufferedLogger`. Storage and console
rendering are independent: suppressing one never changes the other.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from lib_log_buffers.application.ports import ClockPort, ConsolePort
from lib_log_buffers.domain import BufferStore, LogCategory, LogConfig, LogEntry
from lib_log_buffers.domain.entry import format_timestamp, normalise_buffer_ids, render_line

from ._diagnostics import DiagnosticHook, build_diagnostic_emitter

WriteLogCallable = Callable[..., LogEntry]


def create_write_log(
    *,
    store: BufferStore,
    config: Callable[[], LogConfig],
    console: ConsolePort,
    clock: ClockPort,
    diagnostic: DiagnosticHook = None,
) -> WriteLogCallable:
    """Build the recorder capturing the current dependency wiring.

    Parameters
    ----------
    store:
        :class:`BufferStore` receiving the entries.
    config:
        Zero-argument callable returning the live :class:`LogConfig`; read on
        every call so configuration resets take effect immediately.
    console:
        Adapter implementing :class:`ConsolePort`.
    clock:
        Provider of the current time.
    diagnostic:
        Optional callback invoked with ``recorded`` milestones.

    Returns
    -------
    Callable
        ``write_log(message, category=RAW, level=0, *, show_timestamp=None,
        show_console=None, color=None, no_store=False, buffer_ids=())``
        returning the :class:`LogEntry` built for the call.
    """

    emit_diagnostic = build_diagnostic_emitter(diagnostic)

    def write_log(
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
        """Record ``message`` and return the entry that was (or would be) stored."""

        resolved = LogCategory.coerce(category)
        if not isinstance(message, str) or not message.strip():
            raise ValueError("message must not be empty")
        if not isinstance(level, int) or isinstance(level, bool) or level < 0:
            raise ValueError(f"level must be a non-negative integer, got {level!r}")
        targets = normalise_buffer_ids(buffer_ids)

        settings = config()
        store.ensure(targets)
        timestamp = format_timestamp(clock.now())
        rendered = render_line(message, resolved, settings.indentation(level))

        timestamp_enabled = settings.show_timestamp if show_timestamp is None else show_timestamp
        console_enabled = settings.show_console if show_console is None else show_console
        if console_enabled:
            console_line = f"[{timestamp}] {rendered}" if timestamp_enabled else rendered
            console.emit(console_line, color=color if color is not None else settings.color_for(resolved))

        entry = LogEntry(
            timestamp=timestamp,
            level=level,
            category=resolved,
            message=message,
            rendered_line=rendered,
            buffer_ids=targets,
        )
        if no_store:
            return entry

        store.append(entry, targets)
        emit_diagnostic(
            "recorded",
            {"category": resolved.value, "level": level, "buffer_ids": list(targets)},
        )
        return entry

    return write_log


__all__ = ["WriteLogCallable", "create_write_log"]
