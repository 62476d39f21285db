"""
Purchases module configuration.
"""
from django.apps import AppConfig


class PurchasesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'modules.purchases'
    verbose_name = 'Purchases'
