"""Runtime settings resolved from arguments and environment variables.

Purpose
-------
Translate ``init`` keyword arguments plus ``LOG_*`` environment overrides into
a frozen :class:`RuntimeSettings` consumed by the composition root.

Contents
--------
* :class:`RuntimeSettings` dataclass.
* :func:`build_runtime_settings` and :func:`settings_from_environment`.
* Parsing helpers ``_env_bool``, ``_env_int`` and ``_parse_color_styles``.

Alignment Notes
---------------
Environment variables take precedence over call arguments.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from lib_log_buffers.application.ports import ConsolePort
from lib_log_buffers.application.use_cases._diagnostics import DiagnosticHook
from lib_log_buffers.domain import LogCategory

ENV_SHOW_TIMESTAMP = "LOG_SHOW_TIMESTAMP"
ENV_SHOW_CONSOLE = "LOG_SHOW_CONSOLE"
ENV_INDENT_SIZE = "LOG_INDENT_SIZE"
ENV_INDENT_CHAR = "LOG_INDENT_CHAR"
ENV_COLORS = "LOG_COLORS"
ENV_FORCE_COLOR = "LOG_FORCE_COLOR"
ENV_NO_COLOR = "LOG_NO_COLOR"


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Resolved inputs for :func:`lib_log_buffers.runtime._composition.build_logger`.

    ``config_overrides`` only carries the configuration fields that were set
    explicitly; everything else keeps the default template.
    """

    config_overrides: Mapping[str, Any] = field(default_factory=dict)
    force_color: bool = False
    no_color: bool = False
    diagnostic_hook: DiagnosticHook = None
    console_factory: Callable[["RuntimeSettings"], ConsolePort] | None = None


def _env_bool(name: str, default: bool | None) -> bool | None:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> _env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = 'off'
    >>> _env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL')
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int | None) -> int | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


def _parse_color_styles(raw: str | None) -> dict[str, str | None]:
    """Convert ``Type=style`` comma-separated strings into a dictionary.

    An empty style (``Raw=``) or ``none`` clears the colour for that category.

    Examples
    --------
    >>> _parse_color_styles('Info=green, Error = bold red, Sub=none')
    {'Info': 'green', 'Error': 'bold red', 'Sub': None}
    >>> _parse_color_styles(None)
    {}
    """
    if not raw:
        return {}
    result: dict[str, str | None] = {}
    for chunk in raw.split(","):
        if "=" not in chunk:
            continue
        key, value = chunk.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        LogCategory.from_name(key)
        result[key] = None if not value or value.lower() == "none" else value
    return result


def settings_from_environment() -> dict[str, Any]:
    """Return the configuration overrides present in the environment.

    Examples
    --------
    >>> import os
    >>> os.environ['LOG_INDENT_SIZE'] = '3'
    >>> settings_from_environment()['indent_size']
    3
    >>> _ = os.environ.pop('LOG_INDENT_SIZE')
    """

    overrides: dict[str, Any] = {}
    show_timestamp = _env_bool(ENV_SHOW_TIMESTAMP, None)
    if show_timestamp is not None:
        overrides["show_timestamp"] = show_timestamp
    show_console = _env_bool(ENV_SHOW_CONSOLE, None)
    if show_console is not None:
        overrides["show_console"] = show_console
    indent_size = _env_int(ENV_INDENT_SIZE, None)
    if indent_size is not None:
        overrides["indent_size"] = indent_size
    indent_char = os.getenv(ENV_INDENT_CHAR)
    if indent_char:
        overrides["indent_char"] = indent_char
    colors = _parse_color_styles(os.getenv(ENV_COLORS))
    if colors:
        overrides["colors"] = colors
    return overrides


def build_runtime_settings(
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
) -> RuntimeSettings:
    """Merge explicit arguments with environment overrides."""

    overrides: dict[str, Any] = {}
    explicit = {
        "show_timestamp": show_timestamp,
        "indent_size": indent_size,
        "indent_char": indent_char,
        "show_console": show_console,
    }
    overrides.update({key: value for key, value in explicit.items() if value is not None})
    merged_colors: dict[LogCategory | str, str | None] = dict(colors or {})

    if use_environment:
        env_overrides = settings_from_environment()
        merged_colors.update(env_overrides.pop("colors", {}))
        overrides.update(env_overrides)
        force_color = bool(_env_bool(ENV_FORCE_COLOR, force_color))
        no_color = bool(_env_bool(ENV_NO_COLOR, no_color))

    if merged_colors:
        overrides["colors"] = merged_colors

    return RuntimeSettings(
        config_overrides=overrides,
        force_color=force_color,
        no_color=no_color,
        diagnostic_hook=diagnostic_hook,
        console_factory=console_factory,
    )


__all__ = ["RuntimeSettings", "build_runtime_settings", "settings_from_environment"]
