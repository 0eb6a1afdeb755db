"""
Kiosk Core Time — Civil Time & Order Windows
==============================================
Pure functions for recurring daily interval logic.
All functions take explicit datetime arguments or a Clock — no hidden
clock access.

RULES (NON-NEGOTIABLE):
- Containment has minute precision; seconds are ignored
- Window start is inclusive, window end is exclusive
- from > to spans midnight
- from == to is never open (zero-length, not "all day")
- Day rollover uses date arithmetic, never hour overflow
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional

from core.time.clock import Clock, resolve_clock, to_local


# ══════════════════════════════════════════════════════════════
# CIVIL TIME — hour:minute with no date and no timezone
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True, order=True)
class CivilTime:
    """
    An hour:minute point on the local wall clock.

    Invariant: 0 <= hour <= 23 and 0 <= minute <= 59.
    """

    hour: int
    minute: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.hour, int) or isinstance(self.hour, bool):
            raise ValueError("hour must be an integer.")
        if not isinstance(self.minute, int) or isinstance(self.minute, bool):
            raise ValueError("minute must be an integer.")
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be between 0 and 23, got {self.hour}.")
        if not 0 <= self.minute <= 59:
            raise ValueError(
                f"minute must be between 0 and 59, got {self.minute}."
            )

    @property
    def minutes(self) -> int:
        """Minutes since midnight."""
        return self.hour * 60 + self.minute

    def on(self, day: date) -> datetime:
        """Project this civil time onto a calendar day."""
        return datetime.combine(day, time(self.hour, self.minute))

    def to_dict(self) -> dict:
        return {"hour": self.hour, "minute": self.minute}

    @classmethod
    def from_dict(cls, data: dict) -> CivilTime:
        return cls(hour=int(data["hour"]), minute=int(data.get("minute", 0)))


MIDNIGHT = CivilTime(0, 0)


# ══════════════════════════════════════════════════════════════
# ORDER WINDOW — recurring daily interval [from, to)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class OrderWindow:
    """
    A recurring daily interval during which an item may be sold.

    `from_time` later than `to_time` spans midnight.
    `from_time` equal to `to_time` is never open.
    """

    from_time: CivilTime
    to_time: CivilTime

    def __post_init__(self) -> None:
        if not isinstance(self.from_time, CivilTime):
            raise TypeError("from_time must be CivilTime.")
        if not isinstance(self.to_time, CivilTime):
            raise TypeError("to_time must be CivilTime.")

    @property
    def spans_midnight(self) -> bool:
        return self.from_time.minutes > self.to_time.minutes

    @property
    def is_zero_length(self) -> bool:
        return self.from_time.minutes == self.to_time.minutes

    def contains(self, now: datetime) -> bool:
        """Check if `now` falls within the window (start inclusive, end exclusive)."""
        m = minutes_of(now)
        start = self.from_time.minutes
        end = self.to_time.minutes
        if start < end:
            return start <= m < end
        if start > end:
            return m >= start or m < end
        return False

    def to_dict(self) -> dict:
        return {"from": self.from_time.to_dict(), "to": self.to_time.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> OrderWindow:
        return cls(
            from_time=CivilTime.from_dict(data["from"]),
            to_time=CivilTime.from_dict(data["to"]),
        )


# ══════════════════════════════════════════════════════════════
# PURE TEMPORAL FUNCTIONS
# ══════════════════════════════════════════════════════════════

def minutes_of(dt: datetime) -> int:
    """Minutes since local midnight, ignoring seconds."""
    return dt.hour * 60 + dt.minute


def weekday_of(dt: datetime | date) -> int:
    """Weekday number with 0 = Sunday through 6 = Saturday."""
    return dt.isoweekday() % 7


def start_of_day(dt: datetime | date) -> datetime:
    day = dt.date() if isinstance(dt, datetime) else dt
    return datetime.combine(day, time.min)


def window_contains(window: Optional[OrderWindow], now: datetime) -> bool:
    """Containment test that treats a missing window as closed."""
    if window is None:
        return False
    return window.contains(to_local(now))


def next_boundary(window: OrderWindow, now: datetime) -> datetime:
    """
    Next instant strictly after `now` at which `window` opens or closes.

    Inside the window this is the closing instant; outside it is
    the next opening instant.
    """
    now = to_local(now)
    boundary = window.to_time if window.contains(now) else window.from_time
    candidate = boundary.on(now.date())
    if candidate <= now:
        candidate = boundary.on(now.date() + timedelta(days=1))
    return candidate


def next_window_change(
    windows: Iterable[OrderWindow],
    *,
    clock: Optional[Clock] = None,
) -> Optional[datetime]:
    """
    Nearest future instant at which any window opens or closes.

    Returns None when there are no windows.
    """
    now = to_local(resolve_clock(clock).now())
    soonest: Optional[datetime] = None
    for window in windows:
        if window is None:
            continue
        candidate = next_boundary(window, now)
        if soonest is None or candidate < soonest:
            soonest = candidate
    return soonest


def parse_instant(value) -> Optional[datetime]:
    """
    Parse an ISO-8601 string or datetime into a local naive datetime.

    None and empty strings yield None. A trailing 'Z' is read as UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return to_local(value)
    if not isinstance(value, str):
        raise ValueError(f"Cannot parse instant from {type(value).__name__}.")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return to_local(datetime.fromisoformat(text))
    except ValueError as exc:
        raise ValueError(f"Invalid ISO-8601 instant: {value!r}.") from exc
