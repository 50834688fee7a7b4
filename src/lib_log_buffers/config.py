"""Optional ``.env`` loading for hosts and the CLI.

Purpose
-------
Let operators keep ``LOG_*`` settings in a ``.env`` file next to their
project. Values already present in the environment always win.

Contents
--------
* :func:`enable_dotenv` – locate and load the nearest ``.env`` once.
* ``DOTENV_ENV_VAR`` – environment toggle consulted by the CLI.
"""

from __future__ import annotations

from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LOG_BUFFERS_USE_DOTENV"

_DOTENV_LOCK = Lock()
_DOTENV_LOADED: Path | None = None


def enable_dotenv(search_from: str | Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    Parameters
    ----------
    search_from:
        Directory where the upward search starts; defaults to the current
        working directory.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        if _DOTENV_LOADED is not None:
            return _DOTENV_LOADED
        if search_from is None:
            candidate = find_dotenv(usecwd=True)
        else:
            candidate = _search_upwards(Path(search_from))
        if not candidate:
            return None
        path = Path(candidate).resolve()
        load_dotenv(path, override=False)
        _DOTENV_LOADED = path
        return path


def _search_upwards(start: Path) -> str:
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return str(candidate)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv"]
