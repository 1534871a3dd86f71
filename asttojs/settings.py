"""
Django settings for asttojs project.

Values that differ between deployments are read from the environment:
``ASTTOJS_SECRET_KEY``, ``ASTTOJS_DEBUG`` and ``ASTTOJS_ALLOWED_HOSTS``.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('ASTTOJS_SECRET_KEY', 'asttojs-development-only-secret-key')

DEBUG = os.environ.get('ASTTOJS_DEBUG', '').lower() in ('1', 'true', 'yes', 'on')

ALLOWED_HOSTS = [host for host in os.environ.get('ASTTOJS_ALLOWED_HOSTS', '*').split(',') if host]


# Application definition

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'atj',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'asttojs.urls'

WSGI_APPLICATION = 'asttojs.wsgi.application'

# The service is stateless: nothing is persisted.
DATABASES = {}

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
    'DEFAULT_PARSER_CLASSES': (
        'rest_framework.parsers.JSONParser',
        'rest_framework.parsers.FormParser',
        'rest_framework.parsers.MultiPartParser',
    ),
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [],
    'UNAUTHENTICATED_USER': None,
}

# Options applied to every generate call before the request's own options.
ASTTOJS = {
    'DEFAULT_OPTIONS': {
        'format': {
            'indent': {
                'style': '    ',
            },
        },
    },
}


# Internationalization

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True


LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'atj': {
            'handlers': ['console'],
            'level': 'DEBUG' if DEBUG else 'INFO',
        },
        'jsgen': {
            'handlers': ['console'],
            'level': 'DEBUG' if DEBUG else 'WARNING',
        },
    },
}
