"""
Django settings for the Task Manager API.

All deployment-specific values come from environment variables. There is
no database: tasks live in an in-memory store owned by the tasks app.
"""
import os
from pathlib import Path

from .log_config import get_logging_config

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'dev-insecure-change-me')

DEBUG = os.getenv('DJANGO_DEBUG', 'false').lower() == 'true'

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')
    if host.strip()
]

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'ninja',
    'apps.core',
    'apps.tasks',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'apps.core.middleware.RequestLoggingMiddleware',
    'apps.core.middleware.JsonMethodNotAllowedMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

ASGI_APPLICATION = 'config.asgi.application'

DATABASES = {}

USE_TZ = True
TIME_ZONE = 'UTC'

STATIC_URL = 'static/'

LOGGING = get_logging_config()

# =============================================================================
# Tasks
# =============================================================================

SERVICE_NAME = os.getenv('SERVICE_NAME', 'Task Manager API')
SERVICE_VERSION = os.getenv('SERVICE_VERSION', '1.0.0')

TASKS_REPOSITORY_BACKEND = os.getenv('TASKS_REPOSITORY_BACKEND', 'memory')
TASKS_STORE_LOCK_STRIPES = int(os.getenv('TASKS_STORE_LOCK_STRIPES', '16'))

# Stage prefix stripped from paths when served through API Gateway (config.asgi)
API_GATEWAY_BASE_PATH = os.getenv('API_GATEWAY_BASE_PATH', '/')
