"""
Alerts module configuration.
"""
from django.apps import AppConfig


class AlertsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'modules.alerts'
    verbose_name = 'Alerts'
