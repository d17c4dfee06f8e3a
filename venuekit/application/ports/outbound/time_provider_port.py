"""
TimeProviderPort - clock interface

Signers and normalizers read the current time through this port
instead of calling datetime.now() directly, so tests can pin the clock.

Implementations:
- SystemTimeAdapter: system clock (production)
- FixedTimeAdapter: fixed time (tests)
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import datetime, timezone


class TimeProviderPort(ABC):
    """Clock port interface."""

    @abstractmethod
    def now(self) -> datetime:
        """Return current time (timezone-aware UTC)"""
        pass

    def unix_seconds(self) -> int:
        """Current time as whole Unix seconds"""
        return int(self.now().timestamp())

    def unix_millis(self) -> int:
        """Current time as whole Unix milliseconds"""
        return int(self.now().timestamp() * 1000)


class SystemTimeAdapter(TimeProviderPort):
    """System clock adapter."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedTimeAdapter(TimeProviderPort):
    """
    Fixed clock adapter (tests)

    Naive datetimes are treated as UTC.
    """

    def __init__(self, fixed_time: datetime):
        self._fixed_time = _as_utc(fixed_time)

    def set_time(self, new_time: datetime) -> None:
        """Change the pinned time"""
        self._fixed_time = _as_utc(new_time)

    def now(self) -> datetime:
        return self._fixed_time


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
