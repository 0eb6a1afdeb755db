"""
Kiosk HTTP API - Error Mapping
==============================
Stable transport envelopes for successes, request errors and
closure reasons.
"""

from __future__ import annotations

from typing import Any, Optional

from core.http_api.contracts import HttpApiErrorBody, HttpApiResponse
from engines.kiosk.policies import ClosureReason


def error_response(
    *,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(
        ok=False,
        error=HttpApiErrorBody(
            code=code,
            message=message,
            details=details or {},
        ),
    ).to_dict()


def success_response(
    data: Any,
    *,
    meta: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(ok=True, data=data, meta=meta).to_dict()


def map_closure_reason(reason: ClosureReason) -> dict[str, Any]:
    return {
        **reason.to_dict(),
        "message_key": f"closure.{reason.code.lower()}",
    }
