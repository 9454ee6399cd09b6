"""
Staffgate – Django Settings (Infrastructure Only)
=================================================
Django serves as the framework container for the permission engine.
The engine in staffgate/ does not import settings; only the stores and
the HTTP adapter do.

Environment overrides:
- STAFFGATE_DB_NAME         SQLite database path
- STAFFGATE_SECRET_KEY      Django secret key
- STAFFGATE_DEBUG           "1"/"true" enables debug
- STAFFGATE_LOG_LEVEL       level for the "staffgate" logger tree
- STAFFGATE_STORE_BACKEND   "django" (default) or "memory"
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get(
    "STAFFGATE_SECRET_KEY",
    "staffgate-dev-key-replace-before-deployment",
)

DEBUG = _env_flag("STAFFGATE_DEBUG", True)

ALLOWED_HOSTS = ["*"] if DEBUG else []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    # ── Staffgate stores ──────────────────────────────────
    "staffgate.identity_store",
    "staffgate.permissions_store",
    "staffgate.navigation_store",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL ───────────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"

# ── Database ──────────────────────────────────────────────────
# SQLite for development. Production DB configured separately.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("STAFFGATE_DB_NAME", str(BASE_DIR / "db.sqlite3")),
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Staffgate ─────────────────────────────────────────────────
STAFFGATE_STORE_BACKEND = os.environ.get("STAFFGATE_STORE_BACKEND", "django")

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "staffgate": {
            "handlers": ["console"],
            "level": os.environ.get("STAFFGATE_LOG_LEVEL", "INFO").upper(),
            "propagate": True,
        },
    },
}
