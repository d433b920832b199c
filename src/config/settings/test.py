"""
Django test settings for the GetYourSite web application.
"""

from .base import *  # noqa: F403
from .base import BASE_DIR, env

DEBUG = False

SECRET_KEY = "django-insecure-test-key-only"  # noqa: S105

ALLOWED_HOSTS = ["*"]

# Use fast password hasher for tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Use in-memory email backend
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
CONTACT_NOTIFICATIONS_ENABLED = True
CONTACT_NOTIFICATION_EMAILS = ["team@getyoursite.test"]
CONTACT_NOTIFICATION_TIMEOUT = 2.0

# Use DATABASE_URL if set (Docker), otherwise fall back to a local SQLite file
DATABASES = {
    "default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR.parent / 'test.sqlite3'}"),
}

# Use simple static files storage in tests
STORAGES = {
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}
