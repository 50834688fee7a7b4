"""Runtime state container and access helpers."""

from __future__ import annotations

from threading import RLock
from typing import Callable

from ._logger import BufferedLogger

_STATE: BufferedLogger | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: BufferedLogger) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> None:
    """Remove the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> BufferedLogger:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_buffers.init() must be called before using the runtime")
        return _STATE


def ensure_runtime(factory: Callable[[], BufferedLogger]) -> BufferedLogger:
    """Return the active runtime, installing ``factory()`` when none exists."""

    with _STATE_LOCK:
        global _STATE
        if _STATE is None:
            _STATE = factory()
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when a process-wide logger is installed."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "clear_runtime",
    "current_runtime",
    "ensure_runtime",
    "is_initialised",
    "set_runtime",
]
