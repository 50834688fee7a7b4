"""Runtime composition helpers wiring settings into a :class:`BufferedLogger`.

Purpose
-------
Translate :class:`RuntimeSettings` into the live logger installed by
:func:`lib_log_buffers.init`. The helpers here keep wiring small and testable.

Contents
--------
* :func:`create_console` – default Rich console adapter.
* :func:`build_logger` – composition root used by the façade.
"""

from __future__ import annotations

from lib_log_buffers.adapters import RichConsoleAdapter
from lib_log_buffers.application.ports import ConsolePort
from lib_log_buffers.domain import build_config

from ._logger import BufferedLogger
from ._settings import RuntimeSettings


def create_console(settings: RuntimeSettings) -> ConsolePort:
    """Return the Rich console adapter honouring colour overrides."""

    return RichConsoleAdapter(force_color=settings.force_color, no_color=settings.no_color)


def _select_console_adapter(settings: RuntimeSettings) -> ConsolePort:
    if settings.console_factory is not None:
        return settings.console_factory(settings)
    return create_console(settings)


def build_logger(settings: RuntimeSettings) -> BufferedLogger:
    """Assemble a :class:`BufferedLogger` from resolved settings."""

    return BufferedLogger(
        config=build_config(**settings.config_overrides),
        console=_select_console_adapter(settings),
        diagnostic_hook=settings.diagnostic_hook,
    )


__all__ = ["build_logger", "create_console"]
