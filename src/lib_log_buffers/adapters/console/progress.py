"""Rich progress adapter implementing :class:`ProgressPort`.

Purpose
-------
Forward ``(current, total, label, progress_id)`` updates to a
:class:`rich.progress.Progress` display, one task per ``progress_id``.

System Role
-----------
Pass-through collaborator of the runtime's ``write_progress``. The runtime
skips it entirely when console output is disabled.
"""

from __future__ import annotations

from rich.console import Console
from rich.progress import BarColumn, Progress, TaskID, TextColumn

from lib_log_buffers.application.ports.progress import ProgressPort


def compute_percent(current: int, total: int) -> int:
    """Return ``floor(current / total * 100)`` clamped to ``[0, 100]``.

    Examples
    --------
    >>> compute_percent(1, 3)
    33
    >>> compute_percent(7, 5)
    100
    >>> compute_percent(-2, 5)
    0
    >>> compute_percent(0, 0)
    100
    """

    if total <= 0:
        return 100
    return max(0, min(100, (current * 100) // total))


class RichProgressAdapter(ProgressPort):
    """Drive one Rich progress task per ``progress_id``."""

    def __init__(self, *, console: Console | None = None) -> None:
        self._console = console
        self._progress: Progress | None = None
        self._tasks: dict[int, TaskID] = {}

    def _ensure_progress(self) -> Progress:
        if self._progress is None:
            self._progress = Progress(
                TextColumn("{task.description}"),
                BarColumn(),
                TextColumn("{task.percentage:>3.0f}%"),
                console=self._console,
                transient=True,
            )
            self._progress.start()
        return self._progress

    def update(self, current: int, total: int, *, label: str = "", progress_id: int = 0) -> int:
        """Update the task for ``progress_id`` and return the displayed percent."""

        percent = compute_percent(current, total)
        progress = self._ensure_progress()
        task_id = self._tasks.get(progress_id)
        if task_id is None:
            task_id = progress.add_task(label, total=100)
            self._tasks[progress_id] = task_id
        progress.update(task_id, completed=percent, description=label)

        if total <= 0 or current >= total:
            progress.remove_task(task_id)
            del self._tasks[progress_id]
            if not self._tasks:
                self.stop()
        return percent

    def stop(self) -> None:
        """Stop the live display and forget every task."""

        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._tasks.clear()


__all__ = ["RichProgressAdapter", "compute_percent"]
