"""
Kiosk Django Adapter Wiring
===========================
Constructs HttpApiDependencies from Django settings.

This module is adapter-only glue:
- no engine logic
- the only place that reads settings.KIOSK_AVAILABILITY
- grouping names are collated for KIOSK_AVAILABILITY["COLLATION"],
  falling back to settings.LANGUAGE_CODE
"""

from __future__ import annotations

from typing import Any

from django.conf import settings

from core.http_api.dependencies import HttpApiDependencies
from core.time.clock import SYSTEM_CLOCK
from engines.kiosk.ordering import collation_for_language
from engines.kiosk.projection import DEFAULT_SEARCH_DAYS


def _availability_settings() -> dict[str, Any]:
    return dict(getattr(settings, "KIOSK_AVAILABILITY", {}) or {})


def build_dependencies() -> HttpApiDependencies:
    """Dependencies for one request; settings are re-read every call."""
    options = _availability_settings()
    language = options.get("COLLATION") or getattr(settings, "LANGUAGE_CODE", None)
    return HttpApiDependencies(
        clock=SYSTEM_CLOCK,
        search_days=int(options.get("SEARCH_DAYS", DEFAULT_SEARCH_DAYS)),
        collation=collation_for_language(language),
    )
