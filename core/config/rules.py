"""
Kiosk Core Config — Admin-Configurable Rules
==============================================
Global settings applied uniformly to every kiosk.
Doctrine: No hardcoded opening days in engine logic.
Disabled weekdays come from admin-configurable data, not from
source code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

ALL_WEEKDAYS: FrozenSet[int] = frozenset(range(7))

WEEKDAY_NAMES = (
    "søndag",
    "mandag",
    "tirsdag",
    "onsdag",
    "torsdag",
    "fredag",
    "lørdag",
)


# ══════════════════════════════════════════════════════════════
# GLOBAL CONFIG
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class GlobalConfig:
    """
    Process-wide kiosk configuration.

    disabled_weekdays uses 0 = Sunday through 6 = Saturday.
    """

    disabled_weekdays: FrozenSet[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        days = frozenset(self.disabled_weekdays)
        for day in days:
            if not isinstance(day, int) or isinstance(day, bool):
                raise ValueError(f"Weekday must be an integer, got {day!r}.")
            if day not in ALL_WEEKDAYS:
                raise ValueError(f"Weekday must be between 0 and 6, got {day}.")
        object.__setattr__(self, "disabled_weekdays", days)

    def is_weekday_disabled(self, weekday: int) -> bool:
        return weekday in self.disabled_weekdays

    @property
    def every_day_disabled(self) -> bool:
        return self.disabled_weekdays >= ALL_WEEKDAYS

    def to_dict(self) -> dict:
        return {"disabled_weekdays": sorted(self.disabled_weekdays)}

    @classmethod
    def from_dict(cls, data: dict) -> GlobalConfig:
        # Backend documents nest settings under "configs".
        source = data.get("configs", data)
        if not isinstance(source, dict):
            raise ValueError("configs must be an object.")
        days = source.get(
            "disabled_weekdays", source.get("disabledWeekdays", ())
        )
        return cls(disabled_weekdays=frozenset(int(d) for d in days))
