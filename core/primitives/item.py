"""
Kiosk Item Primitive — Sellable Item Snapshot
===============================================
A product that a kiosk may sell while its recurring daily order
window is open.

RULES (NON-NEGOTIABLE):
- Items are immutable snapshots supplied by the caller
- An item without an order window is never available
- The engine never creates, edits or deletes items

This file contains NO persistence logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.time.temporal import OrderWindow


@dataclass(frozen=True)
class SellableItem:
    """
    Snapshot of a sellable item (product).

    Fields:
        item_id:      Unique identifier
        name:         Display name
        is_active:    Admin on/off switch
        order_window: Recurring daily sale window, or None if unset
    """
    item_id: str
    name: str = ""
    is_active: bool = True
    order_window: Optional[OrderWindow] = None

    def __post_init__(self):
        if not self.item_id or not isinstance(self.item_id, str):
            raise ValueError("item_id must be non-empty string.")
        if not isinstance(self.name, str):
            raise ValueError("name must be a string.")
        if not isinstance(self.is_active, bool):
            raise ValueError("is_active must be bool.")
        if (self.order_window is not None
                and not isinstance(self.order_window, OrderWindow)):
            raise TypeError("order_window must be OrderWindow or None.")

    def to_dict(self) -> dict:
        return {
            "item_id": self.item_id,
            "name": self.name,
            "is_active": self.is_active,
            "order_window": (
                self.order_window.to_dict()
                if self.order_window else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict) -> SellableItem:
        window = data.get("order_window", data.get("orderWindow"))
        return cls(
            item_id=str(data.get("item_id", data.get("_id", ""))),
            name=data.get("name", ""),
            is_active=data.get("is_active", data.get("isActive", True)),
            order_window=OrderWindow.from_dict(window) if window else None,
        )
