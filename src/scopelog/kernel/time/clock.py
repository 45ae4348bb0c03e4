"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def to_epoch_millis(moment: datetime) -> int:
    """Whole milliseconds since the Unix epoch (sub-millisecond part dropped).

    Naive datetimes are interpreted as local time, the same way
    :meth:`datetime.timestamp` treats them.
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return (moment - _EPOCH) // timedelta(milliseconds=1)


__all__ = ["Clock", "FrozenClock", "SystemClock", "to_epoch_millis"]
