"""Buffer enumeration and clearing."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from fnmatch import fnmatchcase

from lib_log_buffers.domain import BufferStore

from ._diagnostics import DiagnosticHook, build_diagnostic_emitter

logger = logging.getLogger(__name__)


def create_list_buffer_ids(*, store: BufferStore) -> Callable[..., list[str]]:
    """Return a callable listing non-empty buffers minus excluded patterns.

    Examples
    --------
    >>> list_ids = create_list_buffer_ids(store=BufferStore())
    >>> list_ids()
    []
    """

    def list_buffer_ids(exclude: Iterable[str] | str = ()) -> list[str]:
        patterns = [exclude] if isinstance(exclude, str) else list(exclude)
        return [buffer_id for buffer_id in store.buffer_ids() if not any(fnmatchcase(buffer_id, pattern) for pattern in patterns)]

    return list_buffer_ids


def create_clear_buffer(*, store: BufferStore, diagnostic: DiagnosticHook = None) -> Callable[..., None]:
    """Return a callable emptying one buffer or discarding the whole store."""

    emit_diagnostic = build_diagnostic_emitter(diagnostic)

    def clear_buffer(buffer_id: str | None = None) -> None:
        store.clear(buffer_id)
        logger.debug("Cleared %s", "all buffers" if buffer_id is None else f"buffer {buffer_id!r}")
        emit_diagnostic("cleared", {"buffer_id": buffer_id})

    return clear_buffer


__all__ = ["create_clear_buffer", "create_list_buffer_ids"]
