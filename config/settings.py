"""
hrcore – Django Settings (Persistence Only)
===========================================
Django hosts the permission store: role grants, per-user overrides
and company memberships. The access engine itself does not need Django.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("HRCORE_SECRET_KEY", "hrcore-dev-key-replace-before-deployment")

DEBUG = os.environ.get("HRCORE_DEBUG", "1") == "1"

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    # ── hrcore ────────────────────────────────────────────
    "hrcore.permissions_store",
]

MIDDLEWARE = []

# ── Database ──────────────────────────────────────────────────
# SQLite for development and tests. Production DB configured separately.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("HRCORE_DB_PATH", BASE_DIR / "db.sqlite3"),
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ── Default Primary Key ──────────────────────────────────────
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Logging ───────────────────────────────────────────────────
# The library only emits records under the "hrcore" logger; handlers
# are the host's choice. This sends them to the console in development.
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "hrcore": {
            "handlers": ["console"],
            "level": os.environ.get("HRCORE_LOG_LEVEL", "INFO"),
        },
    },
}
