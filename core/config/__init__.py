"""
Kiosk Core Config — Public API
================================
Admin-configurable rules (globally disabled weekdays).
"""

from core.config.rules import (
    ALL_WEEKDAYS,
    WEEKDAY_NAMES,
    GlobalConfig,
)

__all__ = [
    "ALL_WEEKDAYS",
    "WEEKDAY_NAMES",
    "GlobalConfig",
]
