"""
Kiosk Core Time — Public API
==============================
Explicit clock protocol and civil-time window helpers.
Doctrine: NO datetime.now() in engine logic.
"""

from core.time.clock import (
    SYSTEM_CLOCK,
    Clock,
    FixedClock,
    SystemClock,
    resolve_clock,
    to_local,
)
from core.time.temporal import (
    MIDNIGHT,
    CivilTime,
    OrderWindow,
    minutes_of,
    next_boundary,
    next_window_change,
    parse_instant,
    start_of_day,
    weekday_of,
    window_contains,
)

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "SYSTEM_CLOCK",
    "resolve_clock",
    "to_local",
    "CivilTime",
    "OrderWindow",
    "MIDNIGHT",
    "minutes_of",
    "weekday_of",
    "start_of_day",
    "window_contains",
    "next_boundary",
    "next_window_change",
    "parse_instant",
]
