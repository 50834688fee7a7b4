"""Ports for time and host identity."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current timestamp."""

    def now(self) -> datetime: ...


@runtime_checkable
class SystemIdentityPort(Protocol):
    """Report the host and account recorded in snapshot metadata."""

    @property
    def hostname(self) -> str: ...

    @property
    def user_name(self) -> str: ...


__all__ = ["ClockPort", "SystemIdentityPort"]
