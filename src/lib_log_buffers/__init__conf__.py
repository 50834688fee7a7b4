"""Static package metadata surfaced by the CLI ``info`` command.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Callable

name = "lib_log_buffers"
title = "In-process structured logging into named, filterable buffers"
version = "0.1.0"
homepage = "https://github.com/lib-log-buffers/lib_log_buffers"
author = "lib_log_buffers contributors"
author_email = "maintainers@lib-log-buffers.dev"
shell_command = "lib_log_buffers"


def print_info(writer: Callable[[str], None] = print) -> None:
    """Emit the metadata banner line by line through ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_buffers:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n")
    writer("\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")
