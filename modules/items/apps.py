"""
Items module configuration.
"""
from django.apps import AppConfig


class ItemsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'modules.items'
    verbose_name = 'Items'
