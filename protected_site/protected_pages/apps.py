"""
Protected Pages App Configuration
"""

from django.apps import AppConfig


class ProtectedPagesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'protected_pages'
    verbose_name = 'Protected Pages'
