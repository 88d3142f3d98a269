"""Celery application for the Wisma Nusantara backend.

Reads configuration from Django settings under the `CELERY_` namespace and
autodiscovers `tasks.py` modules of the installed apps.
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("wisma_nusantara")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()
