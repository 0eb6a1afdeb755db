"""
Kiosk Engine — Availability Filters
=====================================
Reduces item and grouping snapshots to those sellable right now.

RULES (NON-NEGOTIABLE):
- Filters preserve input order (items) and never raise
- An item is available iff it is active AND inside its order window
- A grouping is available iff the kiosk enables it AND at least one
  available item is not excluded by it
- No kiosk → no groupings
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from core.primitives.grouping import Grouping
from core.primitives.item import SellableItem
from core.primitives.terminal import Terminal
from core.time.clock import Clock, resolve_clock, to_local
from core.time.temporal import window_contains
from engines.kiosk.ordering import CollationKey, sort_groupings_by_name

logger = logging.getLogger("kiosk.engines")


# ══════════════════════════════════════════════════════════════
# ITEMS
# ══════════════════════════════════════════════════════════════

def is_item_available_at(item: SellableItem, now: datetime) -> bool:
    return item.is_active and window_contains(item.order_window, now)


def items_available_at(
    items: Iterable[SellableItem], now: datetime,
) -> List[SellableItem]:
    now = to_local(now)
    return [item for item in items if is_item_available_at(item, now)]


def available_items(
    items: Iterable[SellableItem],
    *,
    clock: Optional[Clock] = None,
) -> List[SellableItem]:
    """Items that are active and inside their order window now."""
    return items_available_at(items, resolve_clock(clock).now())


# ══════════════════════════════════════════════════════════════
# GROUPINGS
# ══════════════════════════════════════════════════════════════

def _offers_any(grouping: Grouping, items: Sequence[SellableItem]) -> bool:
    return any(not grouping.excludes(item.item_id) for item in items)


def available_groupings(
    groupings: Iterable[Grouping],
    terminal: Optional[Terminal],
    available: Sequence[SellableItem],
    *,
    collation: Optional[CollationKey] = None,
) -> List[Grouping]:
    """
    Groupings the kiosk may offer right now, sorted by name.

    `available` is the output of `available_items`, so this function
    needs no clock of its own.
    """
    if terminal is None:
        logger.debug("No terminal supplied; no groupings are available.")
        return []

    enabled = [g for g in groupings if terminal.enables(g.grouping_id)]
    offered = [g for g in enabled if _offers_any(g, available)]
    return sort_groupings_by_name(offered, collation)
