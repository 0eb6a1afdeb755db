"""
Kiosk Django Adapter Views
==========================
Pass-through HTTP views over core/http_api handlers.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.wiring import build_dependencies
from core.http_api.contracts import AvailabilityReadRequest
from core.http_api.errors import error_response
from core.http_api.handlers import get_kiosk_availability

logger = logging.getLogger("kiosk.http")


def _json_error(code: str, message: str, status: int = 400) -> JsonResponse:
    return JsonResponse(
        error_response(code=code, message=message, details={}),
        status=status,
    )


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _method_not_allowed() -> JsonResponse:
    return _json_error(
        "METHOD_NOT_ALLOWED",
        "Method not allowed for this endpoint.",
        status=405,
    )


@csrf_exempt
def kiosk_availability_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    try:
        body = _parse_json_body(request)
        contract = AvailabilityReadRequest.from_dict(body)
    except (ValueError, TypeError, KeyError) as exc:
        logger.warning("Rejected availability request: %s", exc)
        return _json_error("INVALID_REQUEST", str(exc), status=400)

    payload = get_kiosk_availability(contract, build_dependencies())
    return JsonResponse(payload)
