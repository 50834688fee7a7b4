from __future__ import annotations

from rich.console import Console

from lib_log_buffers.adapters.console.rich_console import RichConsoleAdapter


def _output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


def test_emit_applies_style(record_console: Console) -> None:
    """Lines carry the requested rich style."""

    RichConsoleAdapter(console=record_console).emit("[+] added", color="green")
    output = _output(record_console)
    assert "[+] added" in output
    assert "\x1b[32m" in output


def test_emit_without_color_prints_plain_line(record_console: Console) -> None:
    """A missing colour prints the line unstyled."""

    RichConsoleAdapter(console=record_console).emit("plain line")
    assert _output(record_console) == "plain line\n"


def test_no_color_strips_requested_style(record_console: Console) -> None:
    """``no_color`` suppresses every style."""

    RichConsoleAdapter(console=record_console, no_color=True).emit("[✖] failed", color="red")
    assert _output(record_console) == "[✖] failed\n"


def test_brackets_are_not_treated_as_markup(record_console: Console) -> None:
    """Icon brackets survive as literal text."""

    RichConsoleAdapter(console=record_console).emit("[bold]literal[/bold] [i] info")
    assert "[bold]literal[/bold] [i] info" in record_console.export_text()


def test_default_console_honours_colour_switches() -> None:
    """The lazily built console respects the colour flags."""

    adapter = RichConsoleAdapter(force_color=True, no_color=True)
    assert adapter.console.is_terminal
    assert adapter.console.no_color
