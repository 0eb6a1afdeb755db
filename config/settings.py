"""
Kiosk – Django Settings (Infrastructure Only)
==============================================
Django serves as the HTTP container for the availability engine.
The engine is the authority — Django does not dictate structure,
and engine code never imports Django.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get(
    "KIOSK_SECRET_KEY", "kiosk-dev-key-replace-before-deployment"
)

DEBUG = os.environ.get("KIOSK_DEBUG", "true").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = [
    h.strip()
    for h in os.environ.get("KIOSK_ALLOWED_HOSTS", "").split(",")
    if h.strip()
]

# ── Installed Apps ────────────────────────────────────────────
# The engine has no models; only framework basics are needed.
INSTALLED_APPS = [
    "django.contrib.contenttypes",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL ───────────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"

# ── Database ──────────────────────────────────────────────────
# The engine is stateless; persistence lives in the CRUD backend.
DATABASES = {}

# ── Internationalization ──────────────────────────────────────
# Kiosk instants are local wall-clock times.
LANGUAGE_CODE = "da"
TIME_ZONE = os.environ.get("KIOSK_TIME_ZONE", "Europe/Copenhagen")
USE_I18N = True
USE_TZ = False

# ── Availability Engine ───────────────────────────────────────
KIOSK_AVAILABILITY = {
    # Calendar days searched when projecting the next opening.
    "SEARCH_DAYS": int(os.environ.get("KIOSK_SEARCH_DAYS", "8")),
    # Language whose alphabet orders grouping names.
    "COLLATION": os.environ.get("KIOSK_COLLATION", LANGUAGE_CODE),
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "kiosk": {
            "handlers": ["console"],
            "level": os.environ.get("KIOSK_LOG_LEVEL", "INFO"),
        },
    },
}
