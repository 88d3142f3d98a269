"""Development settings for the Wisma Nusantara backend.

This module extends the base settings with development specific
configuration, such as enabling debug, allowing all hosts and running
Celery tasks inline. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ["*"]

# No broker needed locally: confirmation tasks run in-process
CELERY_TASK_ALWAYS_EAGER = get_env("CELERY_TASK_ALWAYS_EAGER", "true").lower() == "true"  # noqa: F405
