"""
Django development settings.
"""
from .base import *  # noqa: F401, F403

DEBUG = True
ALLOWED_HOSTS = ['*']

INSTALLED_APPS = ['debug_toolbar'] + INSTALLED_APPS + ['django_extensions']  # noqa: F405
MIDDLEWARE = ['debug_toolbar.middleware.DebugToolbarMiddleware'] + MIDDLEWARE  # noqa: F405
INTERNAL_IPS = ['127.0.0.1', 'localhost']

# Local SQLite instead of PostgreSQL when no database container is running
if config('DEV_USE_SQLITE', default=False, cast=bool):  # noqa: F405
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',  # noqa: F405
        }
    }

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

CORS_ALLOW_ALL_ORIGINS = True

# Surface stale category paths quickly while working on the hierarchy code
CELERY_BEAT_SCHEDULE = {
    **CELERY_BEAT_SCHEDULE,  # noqa: F405
    'report-category-path-drift': {
        'task': 'modules.categories.tasks.report_path_drift',
        'schedule': 15 * 60,
    },
}

# SQL for every query; the path rebuilds are query-heavy
LOGGING['loggers']['django.db.backends'] = {  # noqa: F405
    'handlers': ['console'],
    'level': config('DEV_SQL_LOG_LEVEL', default='DEBUG'),  # noqa: F405
    'propagate': False,
}
LOGGING['handlers']['console']['formatter'] = 'simple'  # noqa: F405
