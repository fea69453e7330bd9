"""
Celery configuration for the product catalog service.

``DJANGO_SETTINGS_MODULE`` is set before the app is instantiated so that
Celery reads the Django settings (``CELERY_`` prefix).  The tasks in
``modules.products.tasks`` are the RPC boundary used by other services.
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("product_catalog")

# Reads Django settings prefixed with CELERY_
app.config_from_object("django.conf:settings", namespace="CELERY")

# Discovers tasks.py in every installed app
app.autodiscover_tasks()
