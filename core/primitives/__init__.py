"""
Kiosk Core Primitives — Snapshot Value Types
==============================================
Primitives are the engine-agnostic building blocks the availability
engine consumes. They are:

- Pure Python (no Django dependency)
- Immutable (frozen dataclasses)
- Read-only snapshots supplied by the caller

Primitives:
    item      — Sellable item (product) with a recurring order window
    grouping  — Grouping (activity) with per-item exclusions
    terminal  — Kiosk with manual / timed deactivation
"""

from core.primitives.grouping import Grouping
from core.primitives.item import SellableItem
from core.primitives.terminal import Terminal

__all__ = [
    "SellableItem",
    "Grouping",
    "Terminal",
]
