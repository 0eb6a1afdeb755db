"""
Kiosk Terminal Primitive — Point-of-Sale Kiosk Snapshot
=========================================================
A kiosk may be closed by an admin in two ways:

- manually, with no expiry (sticky until reopened)
- until a specific instant, after which it reopens by itself

Manual deactivation takes precedence and stays in force even when
`deactivated_until` has already elapsed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, Optional

from core.time.clock import to_local
from core.time.temporal import parse_instant


@dataclass(frozen=True)
class Terminal:
    """
    Snapshot of a terminal (kiosk).

    Fields:
        terminal_id:          Unique identifier
        name:                 Display name
        manually_deactivated: Closed by an admin with no expiry
        deactivated_until:    Closed until this local instant, or None
        enabled_grouping_ids: Groupings this kiosk offers
    """
    terminal_id: str
    name: str = ""
    manually_deactivated: bool = False
    deactivated_until: Optional[datetime] = None
    enabled_grouping_ids: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.terminal_id or not isinstance(self.terminal_id, str):
            raise ValueError("terminal_id must be non-empty string.")
        if not isinstance(self.manually_deactivated, bool):
            raise ValueError("manually_deactivated must be bool.")
        if self.deactivated_until is not None:
            if not isinstance(self.deactivated_until, datetime):
                raise TypeError("deactivated_until must be datetime or None.")
            object.__setattr__(
                self, "deactivated_until", to_local(self.deactivated_until)
            )
        if not isinstance(self.enabled_grouping_ids, frozenset):
            object.__setattr__(
                self, "enabled_grouping_ids",
                frozenset(self.enabled_grouping_ids),
            )

    def is_deactivated_at(self, at: datetime) -> bool:
        """Manual deactivation, or a deactivation expiry still in the future."""
        if self.manually_deactivated:
            return True
        if self.deactivated_until is None:
            return False
        return self.deactivated_until > to_local(at)

    def enables(self, grouping_id: str) -> bool:
        return grouping_id in self.enabled_grouping_ids

    def to_dict(self) -> dict:
        return {
            "terminal_id": self.terminal_id,
            "name": self.name,
            "manually_deactivated": self.manually_deactivated,
            "deactivated_until": (
                self.deactivated_until.isoformat()
                if self.deactivated_until else None
            ),
            "enabled_grouping_ids": sorted(self.enabled_grouping_ids),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Terminal:
        manual = data.get(
            "manually_deactivated",
            data.get("manualClosed", data.get("deactivated", False)),
        )
        if manual is None:
            manual = False
        until = data.get(
            "deactivated_until",
            data.get("closedUntil", data.get("deactivatedUntil")),
        )
        enabled = data.get(
            "enabled_grouping_ids", data.get("enabledActivities") or ()
        )
        return cls(
            terminal_id=str(data.get("terminal_id", data.get("_id", ""))),
            name=data.get("name", ""),
            manually_deactivated=manual,
            deactivated_until=parse_instant(until),
            enabled_grouping_ids=frozenset(str(g) for g in enabled),
        )
