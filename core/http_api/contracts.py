"""
Kiosk HTTP API - Contracts
==========================
Framework-agnostic request/response DTOs for availability endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from core.config.rules import GlobalConfig
from core.primitives.grouping import Grouping
from core.primitives.item import SellableItem
from core.primitives.terminal import Terminal


@dataclass(frozen=True)
class AvailabilityReadRequest:
    """
    Snapshot of everything the engine needs for one kiosk.

    `terminal` and `config` may be absent; the engine then reports
    the kiosk as closed.
    """
    items: tuple[SellableItem, ...] = field(default_factory=tuple)
    groupings: tuple[Grouping, ...] = field(default_factory=tuple)
    terminal: Optional[Terminal] = None
    config: Optional[GlobalConfig] = None

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            raise ValueError("items must be a tuple.")
        if not isinstance(self.groupings, tuple):
            raise ValueError("groupings must be a tuple.")
        if self.terminal is not None and not isinstance(self.terminal, Terminal):
            raise ValueError("terminal must be Terminal or None.")
        if self.config is not None and not isinstance(self.config, GlobalConfig):
            raise ValueError("config must be GlobalConfig or None.")

    @classmethod
    def from_dict(cls, body: dict[str, Any]) -> AvailabilityReadRequest:
        items = body.get("items", body.get("products", []))
        groupings = body.get("groupings", body.get("activities", []))
        if not isinstance(items, list):
            raise ValueError("items must be a list.")
        if not isinstance(groupings, list):
            raise ValueError("groupings must be a list.")
        _require_objects("items", items)
        _require_objects("groupings", groupings)
        terminal = body.get("terminal", body.get("kiosk"))
        config = body.get("config", body.get("configs"))
        if terminal is not None and not isinstance(terminal, dict):
            raise ValueError("terminal must be an object or null.")
        if config is not None and not isinstance(config, dict):
            raise ValueError("config must be an object or null.")
        return cls(
            items=tuple(SellableItem.from_dict(i) for i in items),
            groupings=tuple(Grouping.from_dict(g) for g in groupings),
            terminal=Terminal.from_dict(terminal) if terminal else None,
            config=GlobalConfig.from_dict(config) if config else None,
        )


def _require_objects(field_name: str, entries: list) -> None:
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"{field_name}[{index}] must be an object.")


@dataclass(frozen=True)
class HttpApiErrorBody:
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class HttpApiResponse:
    ok: bool
    data: Any = None
    error: Optional[HttpApiErrorBody] = None
    meta: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            payload: dict[str, Any] = {"ok": True, "data": self.data}
            if self.meta:
                payload["meta"] = dict(self.meta)
            return payload
        if self.error is None:
            raise ValueError("error must be set when ok is False.")
        return {"ok": False, "error": self.error.to_dict()}
