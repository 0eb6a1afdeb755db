"""
Kiosk Engine — Closure Policies
=================================
Decides whether a kiosk may take orders right now.

A kiosk is closed when ANY of these independent causes holds:
- it is deactivated (manually, or until a future instant)
- no item is available
- today's weekday is globally disabled

Missing kiosk or config data closes the kiosk. Orders must never be
accepted on incomplete configuration.

Every cause is reported as a ClosureReason so the admin UI can
explain why a kiosk is closed. `is_closed` is simply "any reason".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from core.config.rules import WEEKDAY_NAMES, GlobalConfig
from core.primitives.item import SellableItem
from core.primitives.terminal import Terminal
from core.time.clock import Clock, resolve_clock, to_local
from core.time.temporal import weekday_of

logger = logging.getLogger("kiosk.engines")


# ══════════════════════════════════════════════════════════════
# CLOSURE REASON (frozen explanation structure)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ClosureReason:
    """
    Structured reason for a closed kiosk.

    Fields:
        code:        Machine-readable code (e.g. 'WEEKDAY_DISABLED').
        message:     Human-readable explanation (Danish, shown in the UI).
        policy_name: Name of the policy that closed the kiosk.
    """

    code: str
    message: str
    policy_name: str

    def __post_init__(self):
        if not self.code or not isinstance(self.code, str):
            raise ValueError("code must be a non-empty string.")
        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")
        if not self.policy_name or not isinstance(self.policy_name, str):
            raise ValueError("policy_name must be a non-empty string.")

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "policy_name": self.policy_name,
        }


class ClosureCode:
    """Known closure codes. Convention: SCREAMING_SNAKE_CASE."""

    TERMINAL_MISSING = "TERMINAL_MISSING"
    CONFIG_MISSING = "CONFIG_MISSING"
    MANUALLY_DEACTIVATED = "MANUALLY_DEACTIVATED"
    DEACTIVATED_UNTIL = "DEACTIVATED_UNTIL"
    NO_AVAILABLE_ITEMS = "NO_AVAILABLE_ITEMS"
    WEEKDAY_DISABLED = "WEEKDAY_DISABLED"


# ══════════════════════════════════════════════════════════════
# INDIVIDUAL POLICIES
# ══════════════════════════════════════════════════════════════

def terminal_must_exist_policy(
    terminal: Optional[Terminal],
) -> Optional[ClosureReason]:
    if terminal is None:
        logger.debug("Kiosk closed: no terminal snapshot supplied.")
        return ClosureReason(
            code=ClosureCode.TERMINAL_MISSING,
            message="Kiosken findes ikke.",
            policy_name="terminal_must_exist_policy",
        )
    return None


def config_must_exist_policy(
    config: Optional[GlobalConfig],
) -> Optional[ClosureReason]:
    if config is None:
        logger.debug("Kiosk closed: no config snapshot supplied.")
        return ClosureReason(
            code=ClosureCode.CONFIG_MISSING,
            message="Konfigurationen mangler.",
            policy_name="config_must_exist_policy",
        )
    return None


def terminal_must_be_active_policy(
    terminal: Terminal, now: datetime,
) -> Optional[ClosureReason]:
    """Manual deactivation wins over an elapsed or pending expiry."""
    if not terminal.is_deactivated_at(now):
        return None
    if terminal.manually_deactivated:
        return ClosureReason(
            code=ClosureCode.MANUALLY_DEACTIVATED,
            message="Kiosken er lukket manuelt.",
            policy_name="terminal_must_be_active_policy",
        )
    until = terminal.deactivated_until
    return ClosureReason(
        code=ClosureCode.DEACTIVATED_UNTIL,
        message=f"Kiosken er lukket indtil {until:%d-%m-%Y %H:%M}.",
        policy_name="terminal_must_be_active_policy",
    )


def items_must_be_available_policy(
    available: Sequence[SellableItem],
) -> Optional[ClosureReason]:
    if len(available) == 0:
        return ClosureReason(
            code=ClosureCode.NO_AVAILABLE_ITEMS,
            message="Der er ingen produkter til salg lige nu.",
            policy_name="items_must_be_available_policy",
        )
    return None


def weekday_must_be_enabled_policy(
    config: GlobalConfig, now: datetime,
) -> Optional[ClosureReason]:
    weekday = weekday_of(now)
    if config.is_weekday_disabled(weekday):
        return ClosureReason(
            code=ClosureCode.WEEKDAY_DISABLED,
            message=f"Kiosken holder lukket om {WEEKDAY_NAMES[weekday]}en.",
            policy_name="weekday_must_be_enabled_policy",
        )
    return None


# ══════════════════════════════════════════════════════════════
# COMBINED DECISION
# ══════════════════════════════════════════════════════════════

def closure_reasons_at(
    terminal: Optional[Terminal],
    config: Optional[GlobalConfig],
    available: Sequence[SellableItem],
    now: datetime,
) -> Tuple[ClosureReason, ...]:
    now = to_local(now)
    missing = [
        reason for reason in (
            terminal_must_exist_policy(terminal),
            config_must_exist_policy(config),
        )
        if reason is not None
    ]
    if missing:
        return tuple(missing)

    reasons: List[Optional[ClosureReason]] = [
        terminal_must_be_active_policy(terminal, now),
        items_must_be_available_policy(available),
        weekday_must_be_enabled_policy(config, now),
    ]
    return tuple(r for r in reasons if r is not None)


def closure_reasons(
    terminal: Optional[Terminal],
    config: Optional[GlobalConfig],
    available: Sequence[SellableItem],
    *,
    clock: Optional[Clock] = None,
) -> Tuple[ClosureReason, ...]:
    """Every independent reason the kiosk is closed now; empty when open."""
    return closure_reasons_at(
        terminal, config, available, resolve_clock(clock).now(),
    )


def is_closed_at(
    terminal: Optional[Terminal],
    config: Optional[GlobalConfig],
    available: Sequence[SellableItem],
    now: datetime,
) -> bool:
    return len(closure_reasons_at(terminal, config, available, now)) > 0


def is_closed(
    terminal: Optional[Terminal],
    config: Optional[GlobalConfig],
    available: Sequence[SellableItem],
    *,
    clock: Optional[Clock] = None,
) -> bool:
    """True when the kiosk may not take orders now."""
    return is_closed_at(terminal, config, available, resolve_clock(clock).now())


def is_terminal_deactivated(
    terminal: Optional[Terminal],
    *,
    clock: Optional[Clock] = None,
) -> bool:
    """Derived deactivation state; a missing terminal counts as deactivated."""
    if terminal is None:
        return True
    return terminal.is_deactivated_at(resolve_clock(clock).now())
