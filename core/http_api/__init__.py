"""
Kiosk HTTP API - Public API
===========================
"""

from core.http_api.contracts import (
    AvailabilityReadRequest,
    HttpApiErrorBody,
    HttpApiResponse,
)
from core.http_api.dependencies import HttpApiDependencies
from core.http_api.errors import (
    error_response,
    map_closure_reason,
    success_response,
)
from core.http_api.handlers import get_kiosk_availability

__all__ = [
    "AvailabilityReadRequest",
    "HttpApiErrorBody",
    "HttpApiResponse",
    "HttpApiDependencies",
    "error_response",
    "map_closure_reason",
    "success_response",
    "get_kiosk_availability",
]
