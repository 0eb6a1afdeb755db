"""
Kiosk Availability Engine — Public API
========================================
Pure, side-effect-free decisions over caller-supplied snapshots:

- which items and groupings are sellable right now
- whether a kiosk may take orders right now (and why not)
- when the next open/closed change happens

Every entry point takes an explicit Clock (defaults to the system
clock). No persistence, no background jobs, no caching.
"""

from engines.kiosk.availability import (
    available_groupings,
    available_items,
    is_item_available_at,
    items_available_at,
)
from engines.kiosk.messages import (
    format_civil_time,
    full_date_label,
    humanize_seconds,
    opening_message,
    relative_date_label,
    time_since,
    time_until,
)
from engines.kiosk.ordering import (
    COLLATIONS,
    collation_for_language,
    collation_key,
    danish_collation_key,
    sort_by_window_from,
    sort_by_window_to,
    sort_groupings_by_name,
)
from engines.kiosk.policies import (
    ClosureCode,
    ClosureReason,
    closure_reasons,
    closure_reasons_at,
    is_closed,
    is_closed_at,
    is_terminal_deactivated,
)
from engines.kiosk.projection import (
    DEFAULT_SEARCH_DAYS,
    ItemOpening,
    next_available_item_opening,
    next_available_item_opening_at,
    next_open,
    next_open_at,
)

__all__ = [
    "available_items",
    "items_available_at",
    "is_item_available_at",
    "available_groupings",
    "ClosureCode",
    "ClosureReason",
    "closure_reasons",
    "closure_reasons_at",
    "is_closed",
    "is_closed_at",
    "is_terminal_deactivated",
    "DEFAULT_SEARCH_DAYS",
    "ItemOpening",
    "next_open",
    "next_open_at",
    "next_available_item_opening",
    "next_available_item_opening_at",
    "COLLATIONS",
    "collation_for_language",
    "collation_key",
    "danish_collation_key",
    "sort_by_window_from",
    "sort_by_window_to",
    "sort_groupings_by_name",
    "format_civil_time",
    "full_date_label",
    "humanize_seconds",
    "opening_message",
    "relative_date_label",
    "time_since",
    "time_until",
]
