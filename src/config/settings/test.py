"""
Django test settings for the MarketBloom lead-capture backend.
"""

from .base import *  # noqa: F403
from .base import BASE_DIR, DB_TIMEOUT, bounded_db_options, env

DEBUG = False

SECRET_KEY = "django-insecure-test-key-only"  # noqa: S105

ALLOWED_HOSTS = ["*"]

API_KEY = "test-api-key"
ADMIN_PASSWORD = "test-admin-password"  # noqa: S105

# Use in-memory email backend
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
DEFAULT_FROM_EMAIL = "leads@marketbloom.test"
NOTIFICATION_RECIPIENTS = ["owner@marketbloom.test"]
TIME_ZONE = "Asia/Kolkata"

# Use DATABASE_URL if set (Docker), otherwise an in-memory SQLite database
DATABASES = {
    "default": bounded_db_options(env.db("DATABASE_URL", default="sqlite://:memory:"), DB_TIMEOUT),
}

FRONTEND_DIST_DIR = BASE_DIR.parent / "tests" / "fixtures" / "dist"
WHITENOISE_ROOT = FRONTEND_DIST_DIR

# Use simple static files storage in tests
STORAGES = {
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}
