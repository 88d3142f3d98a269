"""Settings used by the pytest suite.

In-memory SQLite, eager Celery and a dummy WhatsApp gateway so that no test
ever needs a broker or the network.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = "test-secret-key"

ALLOWED_HOSTS = ["*"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"

WHATSAPP_API_URL = "https://wa.example.test"
WHATSAPP_API_USER = "tester"
WHATSAPP_API_PASSWORD = "secret"
WHATSAPP_API_TIMEOUT = 5
