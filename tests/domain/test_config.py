from __future__ import annotations

import pytest

from lib_log_buffers.domain.categories import LogCategory
from lib_log_buffers.domain.config import DEFAULT_COLORS, DEFAULT_CONFIG, LogConfig, build_config


def test_defaults() -> None:
    """Defaults match the documented configuration."""

    config = build_config()
    assert config.show_timestamp is True
    assert config.indent_size == 1
    assert config.indent_char == "|"
    assert config.show_console is True
    assert dict(config.colors) == dict(DEFAULT_COLORS)
    assert config == DEFAULT_CONFIG


def test_indentation_repeats_unit_per_level() -> None:
    """Each level adds one indent unit."""

    config = LogConfig(indent_size=2, indent_char="-")
    assert config.indentation(0) == ""
    assert config.indentation(-3) == ""
    assert config.indentation(2) == " -  - " * 2


def test_zero_indent_size_disables_indentation() -> None:
    """An indent size of zero yields no prefix."""

    assert LogConfig(indent_size=0).indentation(5) == ""


def test_negative_indent_size_is_rejected() -> None:
    """Negative indent sizes raise ``ValueError``."""

    with pytest.raises(ValueError, match="indent_size"):
        LogConfig(indent_size=-1)


def test_colors_are_read_only() -> None:
    """The colour mapping cannot be mutated."""

    config = build_config()
    with pytest.raises(TypeError):
        config.colors[LogCategory.INFO] = "white"  # type: ignore[index]


def test_color_override_merges_key_by_key() -> None:
    """Colour overrides merge into the defaults."""

    config = build_config(colors={"Error": "bold red", LogCategory.RAW: "white"})
    assert config.color_for(LogCategory.ERROR) == "bold red"
    assert config.color_for(LogCategory.RAW) == "white"
    assert config.color_for(LogCategory.INFO) == DEFAULT_COLORS[LogCategory.INFO]


def test_other_overrides_replace_and_leave_rest_default() -> None:
    """Scalar overrides replace only the named fields."""

    config = build_config(indent_char="-", show_console=False)
    assert config.indent_char == "-"
    assert config.show_console is False
    assert config.show_timestamp is DEFAULT_CONFIG.show_timestamp
    assert config.indent_size == DEFAULT_CONFIG.indent_size


def test_override_does_not_leak_into_template() -> None:
    """Overrides never alter the default template."""

    build_config(colors={"Info": "white"})
    assert DEFAULT_COLORS[LogCategory.INFO] == "blue"
    assert DEFAULT_CONFIG.color_for(LogCategory.INFO) == "blue"


def test_unknown_override_is_rejected() -> None:
    """Unknown fields raise ``TypeError``."""

    with pytest.raises(TypeError, match="indent_width"):
        build_config(indent_width=4)


def test_unknown_color_key_is_rejected() -> None:
    """Unknown colour keys raise ``ValueError``."""

    with pytest.raises(ValueError):
        build_config(colors={"Fatal": "red"})
