"""Progress port for long-running host operations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProgressPort(Protocol):
    """Report progress for the task identified by ``progress_id``.

    Implementations clamp the computed percentage to ``[0, 100]`` and treat
    ``current >= total`` as completion. The return value is the percentage
    that was displayed.
    """

    def update(self, current: int, total: int, *, label: str = "", progress_id: int = 0) -> int: ...


__all__ = ["ProgressPort"]
