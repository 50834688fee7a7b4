"""Snapshot export/import of the whole buffer store.

Purpose
-------
Wrap every buffer plus export metadata into a :class:`Snapshot`, persist it,
and restore a store from a previously written document.

Contents
--------
* :func:`create_build_snapshot` / :func:`create_restore_snapshot` for
  in-memory round-trips.
* :func:`create_export_snapshot` / :func:`create_import_snapshot` adding the
  file adapters.

System Role
-----------
Import is the only operation allowed to fail on malformed input. The live
store is replaced in one locked step after the whole document parsed, so a
failing import leaves it untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from lib_log_buffers.application.ports import ClockPort, SystemIdentityPort, TextReaderPort, TextWriterPort
from lib_log_buffers.domain import BufferStore, FileEncoding, Snapshot, SnapshotFormatError
from lib_log_buffers.domain.entry import format_timestamp
from lib_log_buffers.domain.snapshot import SNAPSHOT_VERSION

from ._diagnostics import DiagnosticHook, build_diagnostic_emitter

logger = logging.getLogger(__name__)


def create_build_snapshot(
    *,
    store: BufferStore,
    clock: ClockPort,
    identity: SystemIdentityPort,
) -> Callable[..., Snapshot]:
    """Return a callable capturing the current store as a :class:`Snapshot`."""

    def build_snapshot(session: str = "") -> Snapshot:
        return Snapshot(
            buffers=store.snapshot(),
            version=SNAPSHOT_VERSION,
            export_date=format_timestamp(clock.now()),
            machine=identity.hostname,
            user=identity.user_name,
            session=session,
        )

    return build_snapshot


def create_restore_snapshot(*, store: BufferStore, diagnostic: DiagnosticHook = None) -> Callable[[Snapshot], None]:
    """Return a callable replacing the store with the buffers of a snapshot."""

    emit_diagnostic = build_diagnostic_emitter(diagnostic)

    def restore_snapshot(snapshot: Snapshot) -> None:
        store.replace(snapshot.buffers)
        emit_diagnostic(
            "imported",
            {"buffers": len(snapshot.buffers), "entries": snapshot.entry_count, "session": snapshot.session},
        )

    return restore_snapshot


def create_export_snapshot(
    *,
    build_snapshot: Callable[..., Snapshot],
    writer: TextWriterPort,
    diagnostic: DiagnosticHook = None,
) -> Callable[..., Snapshot]:
    """Return a callable writing the current snapshot to ``path`` as JSON."""

    emit_diagnostic = build_diagnostic_emitter(diagnostic)

    def export_snapshot(
        path: str | Path,
        *,
        session: str = "",
        encoding: FileEncoding | str = FileEncoding.UTF8_NO_BOM,
    ) -> Snapshot:
        resolved_encoding = FileEncoding.coerce(encoding)
        snapshot = build_snapshot(session)
        target = Path(path)
        document = snapshot.to_json(ensure_ascii=resolved_encoding is FileEncoding.ASCII)
        writer.write(target, document, encoding=resolved_encoding, append=False)
        logger.debug("Exported %d buffer(s) to %s", len(snapshot.buffers), target)
        emit_diagnostic("exported", {"path": str(target), "buffers": len(snapshot.buffers), "entries": snapshot.entry_count})
        return snapshot

    return export_snapshot


def create_import_snapshot(
    *,
    restore_snapshot: Callable[[Snapshot], None],
    reader: TextReaderPort,
) -> Callable[..., Snapshot]:
    """Return a callable loading a snapshot file into the store.

    Raises
    ------
    OSError
        When ``path`` cannot be read.
    SnapshotFormatError
        When the document is not JSON, lacks ``Buffers``, or holds invalid
        entry records.
    """

    def import_snapshot(path: str | Path) -> Snapshot:
        source = Path(path)
        try:
            text = reader.read(source)
        except UnicodeDecodeError as exc:
            raise SnapshotFormatError(f"Snapshot {source} is not valid text: {exc}") from exc
        snapshot = Snapshot.from_json(text)
        restore_snapshot(snapshot)
        logger.debug("Imported %d buffer(s) from %s", len(snapshot.buffers), source)
        return snapshot

    return import_snapshot


__all__ = [
    "create_build_snapshot",
    "create_export_snapshot",
    "create_import_snapshot",
    "create_restore_snapshot",
]
