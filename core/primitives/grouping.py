"""
Kiosk Grouping Primitive — Activity Snapshot
==============================================
A named grouping (activity) that a kiosk offers. Each grouping
may exclude specific items from its offering.

Excluding an item id that does not exist has no effect.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class Grouping:
    """Snapshot of a grouping (activity)."""

    grouping_id: str
    name: str = ""
    excluded_item_ids: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.grouping_id or not isinstance(self.grouping_id, str):
            raise ValueError("grouping_id must be non-empty string.")
        if not isinstance(self.name, str):
            raise ValueError("name must be a string.")
        if not isinstance(self.excluded_item_ids, frozenset):
            object.__setattr__(
                self, "excluded_item_ids", frozenset(self.excluded_item_ids)
            )

    def excludes(self, item_id: str) -> bool:
        return item_id in self.excluded_item_ids

    def to_dict(self) -> dict:
        return {
            "grouping_id": self.grouping_id,
            "name": self.name,
            "excluded_item_ids": sorted(self.excluded_item_ids),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Grouping:
        excluded = data.get(
            "excluded_item_ids", data.get("disabledProducts", ())
        )
        return cls(
            grouping_id=str(data.get("grouping_id", data.get("_id", ""))),
            name=data.get("name", ""),
            excluded_item_ids=frozenset(str(i) for i in excluded),
        )
