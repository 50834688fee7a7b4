"""Recorder configuration and its immutable default template.

Purpose
-------
Capture the settings the recorder applies when rendering lines (timestamp
display, indentation, console toggle, colour table) and the reset semantics
used by :func:`lib_log_buffers.reset_configuration`.

Contents
--------
* :class:`LogConfig` frozen dataclass.
* ``DEFAULT_COLORS`` / ``DEFAULT_CONFIG`` immutable templates.
* :func:`build_config` applying partial overrides to a fresh default.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Mapping

from .categories import LogCategory

DEFAULT_COLORS: Mapping[LogCategory, str | None] = MappingProxyType(
    {
        LogCategory.ADD: "cyan",
        LogCategory.INFO: "blue",
        LogCategory.SUCCESS: "green",
        LogCategory.ERROR: "red",
        LogCategory.WARNING: "yellow",
        LogCategory.QUESTION: "magenta",
        LogCategory.SUB: "bright_black",
        LogCategory.RAW: None,
    }
)
"""Default Rich styles keyed by category; ``None`` means the console default."""


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Settings applied by the recorder.

    Attributes
    ----------
    show_timestamp:
        Prefix console lines with ``[timestamp]``. Storage is never affected.
    indent_size:
        Number of indentation units emitted per nesting level.
    indent_char:
        Character framed by spaces in each indentation unit.
    show_console:
        Emit lines to the console sink.
    colors:
        Category to Rich style mapping.
    """

    show_timestamp: bool = True
    indent_size: int = 1
    indent_char: str = "|"
    show_console: bool = True
    colors: Mapping[LogCategory, str | None] = field(default_factory=lambda: dict(DEFAULT_COLORS))

    def __post_init__(self) -> None:
        if not isinstance(self.indent_size, int) or isinstance(self.indent_size, bool) or self.indent_size < 0:
            raise ValueError(f"indent_size must be a non-negative integer, got {self.indent_size!r}")
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))

    @property
    def indent_unit(self) -> str:
        """Return one nesting level worth of indentation.

        Examples
        --------
        >>> LogConfig(indent_size=2, indent_char="-").indent_unit
        ' -  - '
        """

        return f" {self.indent_char} " * self.indent_size

    def indentation(self, level: int) -> str:
        """Return the indentation prefix for ``level`` (empty for ``level <= 0``)."""

        if level <= 0:
            return ""
        return self.indent_unit * level

    def color_for(self, category: LogCategory) -> str | None:
        return self.colors.get(category)


DEFAULT_CONFIG = LogConfig()

CONFIG_FIELDS: frozenset[str] = frozenset(item.name for item in fields(LogConfig))


def merge_colors(
    base: Mapping[LogCategory, str | None],
    overrides: Mapping[LogCategory | str, str | None] | None,
) -> dict[LogCategory, str | None]:
    """Merge ``overrides`` into ``base`` key by key.

    Examples
    --------
    >>> merged = merge_colors(DEFAULT_COLORS, {"error": "bold red"})
    >>> merged[LogCategory.ERROR], merged[LogCategory.INFO]
    ('bold red', 'blue')
    """

    merged = dict(base)
    if not overrides:
        return merged
    for key, value in overrides.items():
        merged[LogCategory.coerce(key)] = value
    return merged


def build_config(**overrides: Any) -> LogConfig:
    """Rebuild a configuration from :data:`DEFAULT_CONFIG` plus ``overrides``.

    Only fields present in ``overrides`` change; ``colors`` merges into the
    default colour map while every other field replaces the default value.

    Raises
    ------
    TypeError
        When ``overrides`` names an unknown field.
    """

    unknown = set(overrides) - CONFIG_FIELDS
    if unknown:
        raise TypeError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")
    fresh = replace(DEFAULT_CONFIG, colors=dict(DEFAULT_COLORS))
    changes = {key: value for key, value in overrides.items() if key != "colors"}
    if "colors" in overrides:
        changes["colors"] = merge_colors(fresh.colors, overrides["colors"])
    return replace(fresh, **changes) if changes else fresh


__all__ = ["CONFIG_FIELDS", "DEFAULT_COLORS", "DEFAULT_CONFIG", "LogConfig", "build_config", "merge_colors"]
