"""
Clock capability injected into time-dependent scoring.

The engine never reads wall-clock time on its own; callers hand it a
clock (or an explicit instant) so results stay reproducible.
"""

from datetime import datetime, timezone
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current instant."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall clock in UTC. Intended for host wiring, not for tests."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock frozen at a single instant."""

    def __init__(self, instant: datetime):
        self.instant = as_utc(instant)

    def now(self) -> datetime:
        return self.instant


def as_utc(value: datetime) -> datetime:
    """Return an aware datetime, treating naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
