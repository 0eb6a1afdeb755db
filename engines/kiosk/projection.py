"""
Kiosk Engine — Forward Projection
===================================
Searches forward in time for the next instant a kiosk (or any item)
becomes available.

RULES (NON-NEGOTIABLE):
- An open kiosk's next opening is "now"
- A manually deactivated kiosk has no predictable opening (None)
- Disabled weekdays are skipped
- The search re-anchors to the day `deactivated_until` falls on
- The search is bounded; weekday rules repeat every 7 days
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence

from core.config.rules import GlobalConfig
from core.primitives.item import SellableItem
from core.primitives.terminal import Terminal
from core.time.clock import Clock, resolve_clock, to_local
from core.time.temporal import (
    CivilTime,
    start_of_day,
    weekday_of,
    window_contains,
)
from engines.kiosk.availability import items_available_at
from engines.kiosk.policies import is_closed_at

logger = logging.getLogger("kiosk.engines")

DEFAULT_SEARCH_DAYS = 8


# ══════════════════════════════════════════════════════════════
# HELPERS
# ══════════════════════════════════════════════════════════════

def _openable(items: Iterable[SellableItem]) -> List[SellableItem]:
    """Active items whose window actually opens at some point of the day."""
    return [
        item for item in items
        if item.is_active
        and item.order_window is not None
        and not item.order_window.is_zero_length
    ]


def _opening_times(items: Sequence[SellableItem]) -> List[CivilTime]:
    return sorted({item.order_window.from_time for item in items})


# ══════════════════════════════════════════════════════════════
# NEXT OPEN
# ══════════════════════════════════════════════════════════════

def next_open_at(
    config: Optional[GlobalConfig],
    terminal: Optional[Terminal],
    items: Sequence[SellableItem],
    now: datetime,
    *,
    search_days: int = DEFAULT_SEARCH_DAYS,
) -> Optional[datetime]:
    now = to_local(now)

    if config is None or terminal is None:
        logger.debug("next_open: terminal or config missing.")
        return None
    if len(items) == 0:
        return None
    if terminal.manually_deactivated:
        return None
    if config.every_day_disabled:
        return None
    if not any(item.is_active for item in items):
        return None

    available = items_available_at(items, now)
    if not is_closed_at(terminal, config, available, now):
        return now

    openable = _openable(items)
    if not openable:
        return None
    opening_times = _opening_times(openable)

    floor = now
    until = terminal.deactivated_until
    if until is not None and until > floor:
        floor = until

    day = floor.date()
    for _ in range(search_days):
        if not config.is_weekday_disabled(weekday_of(day)):
            admissible = max(floor, start_of_day(day))
            if any(window_contains(i.order_window, admissible) for i in openable):
                return admissible
            for opening in opening_times:
                candidate = opening.on(day)
                if candidate >= admissible:
                    return candidate
        day += timedelta(days=1)

    logger.debug(
        "next_open: no opening within %d days of %s.", search_days, floor,
    )
    return None


def next_open(
    config: Optional[GlobalConfig],
    terminal: Optional[Terminal],
    items: Sequence[SellableItem],
    *,
    clock: Optional[Clock] = None,
    search_days: int = DEFAULT_SEARCH_DAYS,
) -> Optional[datetime]:
    """
    Next instant the kiosk would be open.

    Returns now when the kiosk is open, a future instant when it is
    closed, or None when no opening can be predicted.
    """
    return next_open_at(
        config, terminal, items, resolve_clock(clock).now(),
        search_days=search_days,
    )


# ══════════════════════════════════════════════════════════════
# SOONEST ITEM OPENING
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ItemOpening:
    """The next time an item's order window opens."""

    item: SellableItem
    from_time: CivilTime
    at: datetime

    def to_dict(self) -> dict:
        return {
            "item_id": self.item.item_id,
            "from": self.from_time.to_dict(),
            "at": self.at.isoformat(),
        }


def next_available_item_opening_at(
    items: Iterable[SellableItem], now: datetime,
) -> Optional[ItemOpening]:
    now = to_local(now)
    soonest: Optional[ItemOpening] = None
    for item in _openable(items):
        from_time = item.order_window.from_time
        candidate = from_time.on(now.date())
        if candidate <= now:
            candidate = from_time.on(now.date() + timedelta(days=1))
        if soonest is None or candidate < soonest.at:
            soonest = ItemOpening(item=item, from_time=from_time, at=candidate)
    return soonest


def next_available_item_opening(
    items: Iterable[SellableItem],
    *,
    clock: Optional[Clock] = None,
) -> Optional[ItemOpening]:
    """
    Next strictly-future window opening across active items.

    Ignores kiosk and config state. Used by the "close until the next
    item becomes available" admin action.
    """
    return next_available_item_opening_at(items, resolve_clock(clock).now())
