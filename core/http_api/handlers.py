"""
Kiosk HTTP API - Framework-Agnostic Handlers
============================================
Pure handler functions over contracts and injected dependencies.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from core.http_api.contracts import AvailabilityReadRequest
from core.http_api.dependencies import HttpApiDependencies
from core.http_api.errors import map_closure_reason, success_response
from core.time.clock import FixedClock, to_local
from core.time.temporal import next_window_change
from engines.kiosk.availability import available_groupings, items_available_at
from engines.kiosk.messages import opening_message
from engines.kiosk.policies import closure_reasons_at
from engines.kiosk.projection import (
    next_available_item_opening_at,
    next_open_at,
)

logger = logging.getLogger("kiosk.http")


def _iso_or_none(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat()


def get_kiosk_availability(
    request: AvailabilityReadRequest,
    dependencies: HttpApiDependencies,
) -> dict[str, Any]:
    """
    Evaluate one kiosk snapshot at a single instant.

    All derived values are computed against the same `now`, so the
    response is internally consistent.
    """
    now = to_local(dependencies.clock.now())
    available = items_available_at(request.items, now)
    groupings = available_groupings(
        request.groupings,
        request.terminal,
        available,
        collation=dependencies.collation,
    )
    reasons = closure_reasons_at(request.terminal, request.config, available, now)
    reopen_at = next_open_at(
        request.config,
        request.terminal,
        request.items,
        now,
        search_days=dependencies.search_days,
    )
    next_change = next_window_change(
        [i.order_window for i in request.items if i.is_active],
        clock=FixedClock(now),
    )
    item_opening = next_available_item_opening_at(request.items, now)

    terminal_id = request.terminal.terminal_id if request.terminal else None
    logger.info(
        "Availability evaluated for terminal %s: %s",
        terminal_id,
        "CLOSED" if reasons else "OPEN",
    )

    return success_response(
        {
            "terminal_id": terminal_id,
            "evaluated_at": now.isoformat(),
            "is_closed": len(reasons) > 0,
            "closure_reasons": [map_closure_reason(r) for r in reasons],
            "available_item_ids": [i.item_id for i in available],
            "available_grouping_ids": [g.grouping_id for g in groupings],
            "next_change": _iso_or_none(next_change),
            "next_open": _iso_or_none(reopen_at),
            "opening_message": (
                opening_message(reopen_at, clock=FixedClock(now))
                if reasons and reopen_at is not None else None
            ),
            "next_item_opening": (
                item_opening.to_dict() if item_opening else None
            ),
        },
        meta={"search_days": dependencies.search_days},
    )
