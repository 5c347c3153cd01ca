"""
Django settings for the robot vacuum path service.

Everything deployment-specific comes from VACUUM_* environment variables.
"""
from __future__ import annotations

import os
from pathlib import Path

from vacuum_core.services.report import parse_timezone

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.environ.get("VACUUM_SECRET_KEY", "dev-only-change-me")
DEBUG = _env_bool("VACUUM_DEBUG", False)
ALLOWED_HOSTS = [h.strip() for h in os.environ.get("VACUUM_ALLOWED_HOSTS", "*").split(",") if h.strip()]

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "rest_framework",
    "server.executions",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "server.urls"
WSGI_APPLICATION = "server.wsgi.application"
APPEND_SLASH = False

# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

DB_ENGINE = os.environ.get("VACUUM_DB_ENGINE", "sqlite").lower()
DB_POOL_SIZE = int(os.environ.get("VACUUM_DB_POOL_SIZE", "5"))
DB_POOL_TIMEOUT = float(os.environ.get("VACUUM_DB_POOL_TIMEOUT", "30"))

if DB_ENGINE == "postgres":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.environ.get("VACUUM_DB_NAME", "vacuum"),
            "USER": os.environ.get("VACUUM_DB_USER", "vacuum"),
            "PASSWORD": os.environ.get("VACUUM_DB_PASSWORD", "vacuum"),
            "HOST": os.environ.get("VACUUM_DB_HOST", "localhost"),
            "PORT": os.environ.get("VACUUM_DB_PORT", "5432"),
            "OPTIONS": {
                "pool": {
                    "min_size": 1,
                    "max_size": DB_POOL_SIZE,
                    "timeout": DB_POOL_TIMEOUT,
                },
            },
        }
    }
elif DB_ENGINE == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.environ.get("VACUUM_DB_NAME", str(BASE_DIR / "db.sqlite3")),
        }
    }
else:
    raise ValueError(f"Unsupported VACUUM_DB_ENGINE: {DB_ENGINE!r}")

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------

USE_TZ = True
TIME_ZONE = "UTC"

# Zone used when rendering execution timestamps in responses.
RESPONSE_TIME_ZONE = parse_timezone(os.environ.get("VACUUM_RESPONSE_TZ", "Europe/Berlin"))

# ---------------------------------------------------------------------------
# REST framework
# ---------------------------------------------------------------------------

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
}

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.environ.get("VACUUM_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)-8s %(name)s  %(message)s"},
    },
    "handlers": {
        "stdout": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "formatter": "plain",
        },
    },
    "root": {"handlers": ["stdout"], "level": LOG_LEVEL},
    "loggers": {
        "django.db.backends": {"level": "WARNING"},
    },
}
