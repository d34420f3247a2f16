"""
Django settings for the docsite project.

Only what the content renderer needs: the app registry, the template
backend that discovers ``content.templatetags``, logging and Celery.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "docsite-insecure-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "content",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

DATABASES = {}

USE_I18N = True
USE_TZ = True
LANGUAGE_CODE = "en"
TIME_ZONE = "UTC"

# Content rendering
# -----------------
# Any key left out falls back to the defaults in content.markdown.config.
CONTENT_RENDERING = {
    "MARKDOWN_FORMAT": "gfm",
    "PANDOC_EXTRA_ARGS": ["--wrap=preserve"],
}

# Celery
# ------
CELERY_BROKER_URL = os.environ.get("CELERY_BROKER_URL", "redis://localhost:6379/0")
CELERY_RESULT_BACKEND = os.environ.get("CELERY_RESULT_BACKEND", "redis://localhost:6379/1")
CELERY_TASK_SERIALIZER = "json"
CELERY_RESULT_SERIALIZER = "json"
CELERY_ACCEPT_CONTENT = ["json"]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "content": {
            "handlers": ["console"],
            "level": os.environ.get("CONTENT_LOG_LEVEL", "INFO"),
        },
    },
}
