"""Read-side use cases: text, object, and summary retrieval.

Purpose
-------
Apply the shared :class:`EntryFilter` contract to one buffer and render the
result as text, as entry objects, or as a :class:`LogSummary`.

System Role
-----------
Invoked by :class:`~lib_log_buffers.runtime.BufferedLogger` for
``get_log_text``, ``get_log_entries`` and ``get_log_summary``. Unknown or
empty buffers always produce the empty form of each result type.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from lib_log_buffers.domain import DEFAULT_BUFFER_ID, BufferStore, EntryFilter, LogEntry, LogSummary, SeverityThreshold, summarize
from lib_log_buffers.domain.query import NO_LEVEL_FILTER

from ._diagnostics import DiagnosticHook, build_diagnostic_emitter

logger = logging.getLogger(__name__)


def create_get_log_entries(*, store: BufferStore) -> Callable[..., list[LogEntry]]:
    """Return a callable listing the filtered entries of a buffer."""

    def get_log_entries(
        buffer_id: str = DEFAULT_BUFFER_ID,
        *,
        max_level: int = NO_LEVEL_FILTER,
        min_severity: SeverityThreshold | str = SeverityThreshold.ALL,
    ) -> list[LogEntry]:
        entry_filter = EntryFilter.build(max_level=max_level, min_severity=min_severity)
        return entry_filter.apply(store.entries(buffer_id))

    return get_log_entries


def create_get_log_text(*, store: BufferStore, line_separator: str = os.linesep) -> Callable[..., str]:
    """Return a callable rendering the filtered entries of a buffer as text.

    Examples
    --------
    >>> get_text = create_get_log_text(store=BufferStore(), line_separator="\\n")
    >>> get_text("missing")
    ''
    """

    get_log_entries = create_get_log_entries(store=store)

    def get_log_text(
        buffer_id: str = DEFAULT_BUFFER_ID,
        *,
        max_level: int = NO_LEVEL_FILTER,
        min_severity: SeverityThreshold | str = SeverityThreshold.ALL,
        include_timestamp: bool = True,
    ) -> str:
        entries = get_log_entries(buffer_id, max_level=max_level, min_severity=min_severity)
        return line_separator.join(entry.line(include_timestamp=include_timestamp) for entry in entries)

    return get_log_text


def create_get_log_summary(*, store: BufferStore, diagnostic: DiagnosticHook = None) -> Callable[..., LogSummary | str]:
    """Return a callable aggregating a buffer into a :class:`LogSummary`.

    Unparseable timestamps leave ``duration`` empty; the failure is logged as a
    warning and reported to ``diagnostic`` as ``duration_unparseable``.
    """

    emit_diagnostic = build_diagnostic_emitter(diagnostic)

    def get_log_summary(
        buffer_id: str = DEFAULT_BUFFER_ID,
        *,
        max_level: int = NO_LEVEL_FILTER,
        min_severity: SeverityThreshold | str = SeverityThreshold.ALL,
        as_text: bool = False,
    ) -> LogSummary | str:
        entry_filter = EntryFilter.build(max_level=max_level, min_severity=min_severity)

        def _report(first: str, last: str, error: ValueError) -> None:
            logger.warning("Cannot compute duration for buffer %r: %s", buffer_id, error)
            emit_diagnostic(
                "duration_unparseable",
                {"buffer_id": buffer_id, "first": first, "last": last, "error": str(error)},
            )

        summary = summarize(buffer_id, store.entries(buffer_id), entry_filter, on_duration_error=_report)
        return summary.render() if as_text else summary

    return get_log_summary


__all__ = ["create_get_log_entries", "create_get_log_summary", "create_get_log_text"]
