"""
Kiosk Core Time — Explicit Clock Protocol
===========================================
Doctrine: NO datetime.now() inside engine logic.
Every engine entry point receives a Clock. Tests pass a FixedClock;
production code passes (or defaults to) the SystemClock.

Instants are local wall-clock datetimes (naive). Timezone-aware
values are converted to the host's local time on the way in.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Protocol


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class Clock(Protocol):
    """Injectable time source."""

    def now(self) -> datetime:
        """Return the current local wall-clock time."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Production clock — real host wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """
    Test clock — returns a fixed timestamp.

    Usage:
        clock = FixedClock(datetime(2026, 1, 14, 10, 0))
        assert clock.now().hour == 10
    """

    def __init__(self, fixed_dt: datetime) -> None:
        self._fixed_dt = to_local(fixed_dt)

    def now(self) -> datetime:
        return self._fixed_dt

    def advance(self, seconds: float) -> None:
        """Advance the fixed time (useful for multi-step test scenarios)."""
        self._fixed_dt = self._fixed_dt + timedelta(seconds=seconds)


SYSTEM_CLOCK = SystemClock()


def resolve_clock(clock: Optional[Clock]) -> Clock:
    """Return the given clock, or the system clock when none is supplied."""
    return SYSTEM_CLOCK if clock is None else clock


def to_local(dt: datetime) -> datetime:
    """Normalize to a naive local wall-clock datetime."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)
