"""Use case writing a filtered buffer to a text file.

Purpose
-------
Provide the application-layer glue between text retrieval and the file
writer adapter.

Alignment Notes
---------------
An empty filtered result leaves the target untouched; appending to an
existing file inserts a line separator before the new block.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from lib_log_buffers.application.ports import TextWriterPort
from lib_log_buffers.domain import DEFAULT_BUFFER_ID, FileEncoding, SeverityThreshold
from lib_log_buffers.domain.query import NO_LEVEL_FILTER

logger = logging.getLogger(__name__)


def create_save_log(*, get_log_text: Callable[..., str], writer: TextWriterPort) -> Callable[..., bool]:
    """Return a callable persisting ``get_log_text`` output to ``path``.

    Examples
    --------
    >>> class DummyWriter:
    ...     def __init__(self):
    ...         self.calls = []
    ...     def write(self, path, content, *, encoding, append=False):
    ...         self.calls.append((str(path), content, encoding, append))
    >>> writer = DummyWriter()
    >>> save = create_save_log(get_log_text=lambda *args, **kwargs: '', writer=writer)
    >>> save('out.log')
    False
    >>> writer.calls
    []
    """

    def save_log(
        path: str | Path,
        buffer_id: str = DEFAULT_BUFFER_ID,
        *,
        max_level: int = NO_LEVEL_FILTER,
        min_severity: SeverityThreshold | str = SeverityThreshold.ALL,
        include_timestamp: bool = True,
        encoding: FileEncoding | str = FileEncoding.UTF8,
        append: bool = False,
    ) -> bool:
        """Write the filtered buffer; return ``False`` when nothing was written."""

        resolved_encoding = FileEncoding.coerce(encoding)
        content = get_log_text(
            buffer_id,
            max_level=max_level,
            min_severity=min_severity,
            include_timestamp=include_timestamp,
        )
        if not content:
            logger.debug("Nothing to save for buffer %r", buffer_id)
            return False
        writer.write(Path(path), content, encoding=resolved_encoding, append=append)
        return True

    return save_log


__all__ = ["create_save_log"]
