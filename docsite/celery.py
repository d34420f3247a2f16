import os

from celery import Celery

# Workers render templates through Django, so settings must be importable
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "docsite.settings")

app = Celery("docsite")

# Broker and serializer options live in docsite.settings as CELERY_*
app.config_from_object("django.conf:settings", namespace="CELERY")

# Picks up content.tasks (render_content_task) once the app registry is ready
from django.conf import settings
app.autodiscover_tasks(lambda: settings.INSTALLED_APPS)
