"""
Kiosk Engine — Display Messages
=================================
Danish labels for projected instants and durations, as shown on the
kiosk screen and in the admin dashboard.

Durations use fixed approximations (365-day years, 30-day months)
and show at most two units.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Optional, Union

from core.config.rules import WEEKDAY_NAMES
from core.time.clock import Clock, resolve_clock, to_local
from core.time.temporal import CivilTime, parse_instant, weekday_of

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_MONTH = 2592000
SECONDS_PER_YEAR = 31536000

EXPIRED = "Udløbet"
UNKNOWN_DATE = "Ukendt dato"

Instant = Union[datetime, str]


def format_civil_time(value: CivilTime) -> str:
    """Zero-padded HH:MM."""
    return f"{value.hour:02d}:{value.minute:02d}"


def _hhmm(at: datetime) -> str:
    return f"{at.hour:02d}:{at.minute:02d}"


def _day_offset(at: datetime, now: datetime) -> int:
    return (at.date() - now.date()).days


def full_date_label(at: datetime) -> str:
    """'Onsdag d. 14/01 kl. 14:30'."""
    at = to_local(at)
    weekday = WEEKDAY_NAMES[weekday_of(at)].capitalize()
    return f"{weekday} d. {at:%d/%m} kl. {_hhmm(at)}"


def relative_date_label(
    at: Optional[Instant],
    *,
    clock: Optional[Clock] = None,
) -> str:
    at = parse_instant(at)
    if at is None:
        return UNKNOWN_DATE
    offset = _day_offset(at, to_local(resolve_clock(clock).now()))
    if offset == 0:
        return f"i dag kl. {_hhmm(at)}"
    if offset == 1:
        return f"i morgen kl. {_hhmm(at)}"
    return full_date_label(at)


def opening_message(at: datetime, *, clock: Optional[Clock] = None) -> str:
    """Message shown on a closed kiosk about when it opens again."""
    at = to_local(at)
    offset = _day_offset(at, to_local(resolve_clock(clock).now()))
    if offset == 0:
        return f"Kiosken åbner igen kl. {_hhmm(at)}"
    if offset == 1:
        return f"Kiosken åbner igen i morgen kl. {_hhmm(at)}"
    return f"Kiosken åbner igen {full_date_label(at)}"


# ══════════════════════════════════════════════════════════════
# DURATIONS
# ══════════════════════════════════════════════════════════════

def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def _and(major: str, minor_count: int, singular: str, plural: str) -> str:
    if minor_count <= 0:
        return major
    return f"{major} og {_plural(minor_count, singular, plural)}"


def humanize_seconds(seconds: int) -> str:
    """'2 timer og 30 minutter', '1 år', '45 sekunder'."""
    if seconds >= SECONDS_PER_YEAR:
        years = seconds // SECONDS_PER_YEAR
        months = (seconds % SECONDS_PER_YEAR) // SECONDS_PER_MONTH
        return _and(_plural(years, "år", "år"), months, "måned", "måneder")
    if seconds >= SECONDS_PER_MONTH:
        months = seconds // SECONDS_PER_MONTH
        days = (seconds % SECONDS_PER_MONTH) // SECONDS_PER_DAY
        return _and(_plural(months, "måned", "måneder"), days, "dag", "dage")
    if seconds >= SECONDS_PER_DAY:
        days = seconds // SECONDS_PER_DAY
        hours = (seconds % SECONDS_PER_DAY) // SECONDS_PER_HOUR
        return _and(_plural(days, "dag", "dage"), hours, "time", "timer")
    if seconds >= SECONDS_PER_HOUR:
        hours = seconds // SECONDS_PER_HOUR
        minutes = (seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
        return _and(_plural(hours, "time", "timer"), minutes, "minut", "minutter")
    if seconds >= SECONDS_PER_MINUTE:
        return _plural(seconds // SECONDS_PER_MINUTE, "minut", "minutter")
    return _plural(seconds, "sekund", "sekunder")


def _whole_seconds(delta: timedelta) -> int:
    return math.floor(delta.total_seconds())


def time_since(at: Optional[Instant], *, clock: Optional[Clock] = None) -> str:
    """'5 minutter siden'. Future instants clamp to 0 seconds."""
    at = parse_instant(at)
    if at is None:
        return UNKNOWN_DATE
    elapsed = to_local(resolve_clock(clock).now()) - at
    return f"{humanize_seconds(max(_whole_seconds(elapsed), 0))} siden"


def time_until(at: Optional[Instant], *, clock: Optional[Clock] = None) -> str:
    """'om 2 dage og 4 timer', or 'Udløbet' once the instant has passed."""
    at = parse_instant(at)
    if at is None:
        return UNKNOWN_DATE
    remaining = _whole_seconds(at - to_local(resolve_clock(clock).now()))
    if remaining <= 0:
        return EXPIRED
    return f"om {humanize_seconds(remaining)}"
