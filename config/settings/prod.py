"""
Django production settings.
"""
import logging

from .base import *  # noqa: F401, F403

DEBUG = False

# Security settings
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_SSL_REDIRECT = config('DJANGO_SECURE_SSL_REDIRECT', default=True, cast=bool)  # noqa: F405
SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
X_FRAME_OPTIONS = 'DENY'

# Persistent connections; path rebuilds issue many short queries
DATABASES['default']['CONN_MAX_AGE'] = config('DB_CONN_MAX_AGE', default=60, cast=int)  # noqa: F405

# The schema is for the admin frontend only
SPECTACULAR_SETTINGS['SERVE_PERMISSIONS'] = ['rest_framework.permissions.IsAdminUser']  # noqa: F405
SPECTACULAR_SETTINGS['SERVE_AUTHENTICATION'] = [  # noqa: F405
    'rest_framework.authentication.SessionAuthentication',
]

# Weekly drift report alongside the nightly rebuild
CELERY_BEAT_SCHEDULE['report-category-path-drift'] = {  # noqa: F405
    'task': 'modules.categories.tasks.report_path_drift',
    'schedule': 7 * 24 * 60 * 60,
}

# Sentry error tracking
SENTRY_DSN = config('SENTRY_DSN', default='')  # noqa: F405
if SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.celery import CeleryIntegration
    from sentry_sdk.integrations.django import DjangoIntegration
    from sentry_sdk.integrations.logging import LoggingIntegration

    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment=config('SENTRY_ENVIRONMENT', default='production'),  # noqa: F405
        integrations=[
            DjangoIntegration(),
            CeleryIntegration(),
            # DataIntegrityError is logged at ERROR by the exception handler
            LoggingIntegration(event_level=logging.ERROR),
        ],
        traces_sample_rate=config('SENTRY_TRACES_SAMPLE_RATE', default=0.1, cast=float),  # noqa: F405
        send_default_pii=False,
    )

# Logging for production
LOGGING['handlers']['file'] = {  # noqa: F405
    'class': 'logging.handlers.RotatingFileHandler',
    'filename': config('DJANGO_LOG_FILE', default='/var/log/django/app.log'),  # noqa: F405
    'maxBytes': 1024 * 1024 * 10,  # 10 MB
    'backupCount': 5,
    'formatter': 'verbose',
}
LOGGING['root']['handlers'] = ['console', 'file']  # noqa: F405
for _logger in ('modules', 'shared'):
    LOGGING['loggers'][_logger]['handlers'] = ['console', 'file']  # noqa: F405
    LOGGING['loggers'][_logger]['level'] = 'INFO'  # noqa: F405
