"""Click command line interface.

Purpose
-------
Offer a small operator surface around the engine: print the metadata banner,
run a demo that fills a few buffers, and inspect exported snapshots (text,
summary, buffer list) without writing Python.

Contents
--------
* :func:`cli` – root Click group with ``--version`` and dotenv toggles.
* Subcommands ``info``, ``demo``, ``show``, ``summary`` and ``buffers``.
* :func:`main` – test-friendly runner returning an exit code.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable, Sequence, TypeVar

import click

from . import __init__conf__
from . import config as log_config
from .domain import DEFAULT_BUFFER_ID, LogCategory, SeverityThreshold, build_config
from .domain.query import NO_LEVEL_FILTER
from .runtime import BufferedLogger, summary_info
from .runtime._composition import build_logger
from .runtime._settings import _env_bool, build_runtime_settings

T = TypeVar("T")

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_SEVERITY_CHOICE = click.Choice([member.value for member in SeverityThreshold], case_sensitive=False)


def _guard(action: Callable[[], T]) -> T:
    """Run ``action`` translating domain and I/O failures into Click errors."""

    try:
        return action()
    except (ValueError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc


def _snapshot_logger(snapshot: Path) -> BufferedLogger:
    logger = BufferedLogger(config=build_config(show_console=False))
    _guard(lambda: logger.import_snapshot(snapshot))
    return logger


def _filter_options(func: Callable[..., None]) -> Callable[..., None]:
    func = click.option(
        "--min-severity",
        type=_SEVERITY_CHOICE,
        default=SeverityThreshold.ALL.value,
        show_default=True,
        help="Only include entries at or above this severity.",
    )(func)
    func = click.option(
        "--max-level",
        type=click.IntRange(min=NO_LEVEL_FILTER),
        default=NO_LEVEL_FILTER,
        show_default=True,
        help="Only include entries up to this indentation level (-1 disables the filter).",
    )(func)
    func = click.option(
        "--buffer",
        "buffer_id",
        default=DEFAULT_BUFFER_ID,
        show_default=True,
        help="Buffer to read.",
    )(func)
    return func


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before running (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, *, version: bool, use_dotenv: bool | None) -> None:
    """Inspect and demonstrate buffered structured logging."""

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)

    if use_dotenv is None:
        use_dotenv = bool(_env_bool(log_config.DOTENV_ENV_VAR, False))
    if use_dotenv:
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--snapshot", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Export the demo buffers to this file.")
@click.option("--session", default="demo", show_default=True, help="Session label stored in the snapshot.")
def cli_demo(*, snapshot: Path | None, session: str) -> None:
    """Write sample entries to the 'default' and 'alerts' buffers and summarise them.

    The demo logger honours the ``LOG_*`` environment, including values loaded
    from ``.env`` through ``--use-dotenv``.
    """

    logger = _guard(lambda: build_logger(build_runtime_settings()))
    logger.write_log("Starting deployment", LogCategory.ADD)
    logger.write_log("Loading configuration", LogCategory.SUB, level=1)
    logger.write_log("Configuration loaded", LogCategory.SUCCESS, level=1)
    logger.write_log("Disk usage at 91%", LogCategory.WARNING, buffer_ids=["alerts"])
    logger.write_log("Cache node unreachable", LogCategory.ERROR, buffer_ids=["alerts"])
    logger.write_log("Retry later?", LogCategory.QUESTION)
    logger.write_log("Deployment finished", LogCategory.INFO)

    click.echo("")
    click.echo(logger.get_log_summary(as_text=True))
    if snapshot is not None:
        exported = _guard(lambda: logger.export_snapshot(snapshot, session=session))
        click.echo(f"Exported {exported.entry_count} entries in {len(exported.buffers)} buffers to {snapshot}")


@cli.command("show", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_filter_options
@click.option("--timestamp/--no-timestamp", default=True, show_default=True, help="Prefix lines with their timestamp.")
def cli_show(*, snapshot: Path, buffer_id: str, max_level: int, min_severity: str, timestamp: bool) -> None:
    """Print one buffer of an exported snapshot as text."""

    logger = _snapshot_logger(snapshot)
    text = logger.get_log_text(buffer_id, max_level=max_level, min_severity=min_severity, include_timestamp=timestamp)
    if text:
        click.echo(text.replace(os.linesep, "\n"))


@cli.command("summary", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_filter_options
@click.option("--json", "as_json", is_flag=True, help="Emit the structured record as JSON.")
def cli_summary(*, snapshot: Path, buffer_id: str, max_level: int, min_severity: str, as_json: bool) -> None:
    """Summarise one buffer of an exported snapshot."""

    logger = _snapshot_logger(snapshot)
    summary = logger.get_log_summary(buffer_id, max_level=max_level, min_severity=min_severity)
    if as_json:
        click.echo(json.dumps(summary.to_dict(), indent=2))
    else:
        click.echo(summary.render())


@cli.command("buffers", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--exclude", "-x", multiple=True, help="Glob pattern of buffer ids to hide (repeatable).")
def cli_buffers(*, snapshot: Path, exclude: tuple[str, ...]) -> None:
    """List the non-empty buffers of an exported snapshot."""

    logger = _snapshot_logger(snapshot)
    for buffer_id in logger.list_buffer_ids(exclude):
        click.echo(buffer_id)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click command in a test-friendly manner.

    Returns
    -------
    int
        Zero on success, the Click exit code otherwise.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Exit as exit_signal:
        return exit_signal.exit_code
    return 0


__all__ = ["cli", "main"]
