"""Runtime façade exposing the process-wide buffered logger.

Purpose
-------
Expose a stable set of module-level functions (``write_log``,
``get_log_text``, ``get_log_summary``, ``export_snapshot`` …) that host code
uses instead of wiring a :class:`BufferedLogger` itself. The first call
creates the process-wide logger from the environment; :func:`init` replaces it
explicitly.

Contents
--------
* ``init`` / ``shutdown`` – install or discard the process-wide logger.
* ``get_logger`` – access the active :class:`BufferedLogger`.
* Thin delegates for every buffered-logging operation.
* ``summary_info`` – metadata banner used by the CLI.

System Role
-----------
Outer shell of the package: callers depend on these functions while the
domain, application, and adapter layers stay replaceable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterable, Mapping

from lib_log_buffers.application.ports import ConsolePort
from lib_log_buffers.application.use_cases._diagnostics import DiagnosticHook
from lib_log_buffers.domain import (
    DEFAULT_BUFFER_ID,
    FileEncoding,
    LogCategory,
    LogConfig,
    LogEntry,
    LogSummary,
    SeverityThreshold,
    Snapshot,
)
from lib_log_buffers.domain.query import NO_LEVEL_FILTER

from ._composition import build_logger
from ._logger import BufferedLogger
from ._settings import RuntimeSettings, build_runtime_settings, settings_from_environment
from ._state import clear_runtime, ensure_runtime, is_initialised, set_runtime

__all__ = [
    "BufferedLogger",
    "RuntimeSettings",
    "clear_buffer",
    "export_snapshot",
    "get_configuration",
    "get_log_entries",
    "get_log_summary",
    "get_log_text",
    "get_logger",
    "import_snapshot",
    "init",
    "is_initialised",
    "list_buffer_ids",
    "reset_configuration",
    "save_log",
    "settings_from_environment",
    "shutdown",
    "summary_info",
    "write_log",
    "write_progress",
]


def init(
    *,
    show_timestamp: bool | None = None,
    indent_size: int | None = None,
    indent_char: str | None = None,
    show_console: bool | None = None,
    colors: Mapping[LogCategory | str, str | None] | None = None,
    force_color: bool = False,
    no_color: bool = False,
    use_environment: bool = True,
    diagnostic_hook: DiagnosticHook = None,
    console_factory: Callable[[RuntimeSettings], ConsolePort] | None = None,
) -> BufferedLogger:
    """Compose a fresh process-wide logger and install it.

    Why
    ---
    Hosts call ``init`` once during startup when the defaults are not what
    they need. Without it, the first façade call builds a logger from the
    template plus environment overrides.

    Inputs
    ------
    show_timestamp, indent_size, indent_char, show_console, colors:
        Configuration overrides; ``None`` keeps the template value. ``colors``
        merges into the default colour table.
    force_color, no_color:
        Rich console colour switches (``LOG_FORCE_COLOR`` / ``LOG_NO_COLOR``).
    use_environment:
        Apply ``LOG_*`` overrides on top of the arguments.
    diagnostic_hook:
        Callback receiving internal telemetry events. Exceptions raised by the
        hook are swallowed.
    console_factory:
        Optional callable returning a custom :class:`ConsolePort`.

    Outputs
    -------
    The installed :class:`BufferedLogger`. Any previous logger (and its
    buffers) is discarded.
    """

    settings = build_runtime_settings(
        show_timestamp=show_timestamp,
        indent_size=indent_size,
        indent_char=indent_char,
        show_console=show_console,
        colors=colors,
        force_color=force_color,
        no_color=no_color,
        use_environment=use_environment,
        diagnostic_hook=diagnostic_hook,
        console_factory=console_factory,
    )
    runtime = build_logger(settings)
    set_runtime(runtime)
    return runtime


def shutdown() -> None:
    """Discard the process-wide logger and all of its buffers."""

    clear_runtime()


def _default_logger() -> BufferedLogger:
    return build_logger(build_runtime_settings())


def get_logger() -> BufferedLogger:
    """Return the process-wide logger, creating it on first use."""

    return ensure_runtime(_default_logger)


def get_configuration() -> LogConfig:
    return get_logger().configuration


def reset_configuration(**overrides: Any) -> LogConfig:
    """Rebuild configuration from the defaults plus ``overrides`` and clear every buffer.

    Examples
    --------
    >>> config = reset_configuration(indent_char="-", colors={"Error": "bold red"})
    >>> config.indent_char, config.show_timestamp, config.color_for(LogCategory.ERROR)
    ('-', True, 'bold red')
    >>> reset_configuration().indent_char
    '|'
    """

    return get_logger().reset_configuration(**overrides)


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
    """Record ``message`` in the ``default`` buffer plus ``buffer_ids``.

    Per-call ``show_timestamp``/``show_console``/``color`` override the live
    configuration for console output only; ``no_store`` skips the buffers.
    """

    return get_logger().write_log(
        message,
        category,
        level,
        show_timestamp=show_timestamp,
        show_console=show_console,
        color=color,
        no_store=no_store,
        buffer_ids=buffer_ids,
    )


def get_log_text(
    buffer_id: str = DEFAULT_BUFFER_ID,
    *,
    max_level: int = NO_LEVEL_FILTER,
    min_severity: SeverityThreshold | str = SeverityThreshold.ALL,
    include_timestamp: bool = True,
) -> str:
    """Return the filtered buffer joined by the platform line separator."""

    return get_logger().get_log_text(
        buffer_id,
        max_level=max_level,
        min_severity=min_severity,
        include_timestamp=include_timestamp,
    )


def get_log_entries(
    buffer_id: str = DEFAULT_BUFFER_ID,
    *,
    max_level: int = NO_LEVEL_FILTER,
    min_severity: SeverityThreshold | str = SeverityThreshold.ALL,
) -> list[LogEntry]:
    return get_logger().get_log_entries(buffer_id, max_level=max_level, min_severity=min_severity)


def get_log_summary(
    buffer_id: str = DEFAULT_BUFFER_ID,
    *,
    max_level: int = NO_LEVEL_FILTER,
    min_severity: SeverityThreshold | str = SeverityThreshold.ALL,
    as_text: bool = False,
) -> LogSummary | str:
    """Return a :class:`LogSummary` (or its rendered block when ``as_text``)."""

    return get_logger().get_log_summary(buffer_id, max_level=max_level, min_severity=min_severity, as_text=as_text)


def list_buffer_ids(exclude: Iterable[str] | str = ()) -> list[str]:
    """Return sorted ids of non-empty buffers not matching any ``exclude`` glob."""

    return get_logger().list_buffer_ids(exclude)


def clear_buffer(buffer_id: str | None = None) -> None:
    """Empty ``buffer_id`` or, when omitted, forget every buffer."""

    get_logger().clear_buffer(buffer_id)


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
    return get_logger().save_log(
        path,
        buffer_id,
        max_level=max_level,
        min_severity=min_severity,
        include_timestamp=include_timestamp,
        encoding=encoding,
        append=append,
    )


def export_snapshot(
    path: str | Path,
    *,
    session: str = "",
    encoding: FileEncoding | str = FileEncoding.UTF8_NO_BOM,
) -> Snapshot:
    """Write every buffer plus export metadata to ``path`` as JSON."""

    return get_logger().export_snapshot(path, session=session, encoding=encoding)


def import_snapshot(path: str | Path) -> Snapshot:
    """Replace every buffer with the contents of the snapshot at ``path``."""

    return get_logger().import_snapshot(path)


def write_progress(current: int, total: int, label: str = "", progress_id: int = 0) -> int | None:
    return get_logger().write_progress(current, total, label=label, progress_id=progress_id)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point and docs.

    Outputs
    -------
    str
        Multi-line banner ending with a newline.
    """

    from .. import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)
