"""Diagnostic hook plumbing shared by the use cases."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None
DiagnosticEmitter = Callable[[str, dict[str, Any]], None]


def build_diagnostic_emitter(diagnostic: DiagnosticHook) -> DiagnosticEmitter:
    """Wrap ``diagnostic`` so hook failures never reach the caller.

    Examples
    --------
    >>> events = []
    >>> emit = build_diagnostic_emitter(lambda name, payload: events.append((name, payload)))
    >>> emit("cleared", {"buffer_id": "default"})
    >>> events
    [('cleared', {'buffer_id': 'default'})]
    >>> build_diagnostic_emitter(None)("ignored", {})
    """

    def emit(event_type: str, payload: dict[str, Any]) -> None:
        if diagnostic is None:
            return
        try:
            diagnostic(event_type, payload)
        except Exception:  # noqa: BLE001
            logger.debug("Diagnostic hook raised for %s", event_type, exc_info=True)

    return emit


__all__ = ["DiagnosticEmitter", "DiagnosticHook", "build_diagnostic_emitter"]
