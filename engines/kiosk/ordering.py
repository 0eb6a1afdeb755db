"""
Kiosk Engine — Ordering Helpers
=================================
Stable sorts for items and groupings.

Items are ordered by the (hour, minute) of their order window
bounds. Items without a window sort as 00:00. Groupings are ordered
by display name through a collation key, which callers may replace
to match the kiosk's display language (see `collation_for_language`).
"""

from __future__ import annotations

import unicodedata
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from core.primitives.grouping import Grouping
from core.primitives.item import SellableItem
from core.time.temporal import MIDNIGHT, CivilTime

CollationKey = Callable[[str], Any]


def collation_key(name: str) -> tuple:
    """
    Locale-style sort key for display names.

    Compares base letters first, then diacritics, then case
    (lowercase before uppercase).
    """
    decomposed = unicodedata.normalize("NFD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (base.casefold(), decomposed.casefold(), decomposed.swapcase())


# Æ, Ø and Å are letters of their own, sorted after Z in that order.
_DANISH_TAIL = {"æ": 1, "ø": 2, "å": 3}


def _danish_letters(name: str) -> Tuple[Tuple[int, int], ...]:
    weights = []
    for char in unicodedata.normalize("NFC", name).casefold():
        if char in _DANISH_TAIL:
            weights.append((ord("z"), _DANISH_TAIL[char]))
            continue
        for part in unicodedata.normalize("NFD", char):
            if not unicodedata.combining(part):
                weights.append((ord(part), 0))
    return tuple(weights)


def danish_collation_key(name: str) -> tuple:
    """Danish alphabetical order: a-z, then æ, ø, å."""
    decomposed = unicodedata.normalize("NFD", name)
    return (
        _danish_letters(name),
        decomposed.casefold(),
        decomposed.swapcase(),
    )


COLLATIONS: Dict[str, CollationKey] = {
    "da": danish_collation_key,
}


def collation_for_language(language_code: Optional[str]) -> CollationKey:
    """
    Collation key for a language code such as 'da' or 'da-DK'.

    Unknown languages fall back to `collation_key`.
    """
    if not language_code:
        return collation_key
    primary = language_code.replace("_", "-").split("-")[0].lower()
    return COLLATIONS.get(primary, collation_key)


def sort_groupings_by_name(
    groupings: Iterable[Grouping],
    collation: Optional[CollationKey] = None,
) -> List[Grouping]:
    key = collation or collation_key
    return sorted(groupings, key=lambda g: key(g.name))


def _window_from(item: SellableItem) -> CivilTime:
    if item.order_window is None:
        return MIDNIGHT
    return item.order_window.from_time


def _window_to(item: SellableItem) -> CivilTime:
    if item.order_window is None:
        return MIDNIGHT
    return item.order_window.to_time


def sort_by_window_from(items: Iterable[SellableItem]) -> List[SellableItem]:
    """Stable ascending sort by order window start. Returns a new list."""
    return sorted(items, key=_window_from)


def sort_by_window_to(items: Iterable[SellableItem]) -> List[SellableItem]:
    """Stable ascending sort by order window end. Returns a new list."""
    return sorted(items, key=_window_to)
