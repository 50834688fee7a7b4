"""System adapters supplying wall-clock time and host identity."""

from __future__ import annotations

import getpass
import os
import socket
from datetime import datetime

from lib_log_buffers.application.ports.time import ClockPort, SystemIdentityPort


class SystemClock(ClockPort):
    """Concrete clock port returning local wall-clock timestamps."""

    def now(self) -> datetime:
        return datetime.now()


class SystemIdentityProvider(SystemIdentityPort):
    """Resolve the hostname and login name recorded in snapshots."""

    @property
    def hostname(self) -> str:
        try:
            return socket.gethostname()
        except OSError:  # pragma: no cover - platform dependent
            return os.environ.get("COMPUTERNAME", "")

    @property
    def user_name(self) -> str:
        try:
            return getpass.getuser()
        except (KeyError, OSError):  # pragma: no cover - no passwd entry / login name
            return os.environ.get("USERNAME", "")


__all__ = ["SystemClock", "SystemIdentityProvider"]
