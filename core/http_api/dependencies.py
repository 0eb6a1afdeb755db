"""
Kiosk HTTP API - Dependencies
=============================
Injected providers for non-deterministic inputs and handler tuning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from core.time.clock import SYSTEM_CLOCK, Clock
from engines.kiosk.ordering import CollationKey
from engines.kiosk.projection import DEFAULT_SEARCH_DAYS


@dataclass(frozen=True)
class HttpApiDependencies:
    clock: Clock = field(default=SYSTEM_CLOCK)
    search_days: int = DEFAULT_SEARCH_DAYS
    collation: Optional[CollationKey] = None

    def __post_init__(self):
        if not isinstance(self.search_days, int) or self.search_days < 1:
            raise ValueError("search_days must be a positive integer.")
