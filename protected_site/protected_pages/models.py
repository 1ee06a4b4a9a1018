"""
Protected page rules and the path aliases the gate resolves against.
"""

from django.contrib.auth.hashers import make_password
from django.db import models


class ProtectedPage(models.Model):
    """
    A path (or wildcard pattern) that needs a password before it is served.
    A blank password means the global password applies.
    """

    path = models.CharField(
        max_length=255,
        help_text='Concrete path like /vip or a pattern like /secret/*. One pattern per line.'
    )
    password = models.CharField(max_length=128, blank=True, help_text='Salted hash, blank uses the global password')

    class Meta:
        ordering = ['id']
        permissions = [
            ('bypass_protection', 'Bypass pages password protection'),
            ('access_login_screen', 'Access protected page password screen'),
        ]

    def __str__(self):
        return self.path

    @property
    def has_page_password(self):
        return bool(self.password)

    def set_password(self, raw_password):
        self.password = make_password(raw_password) if raw_password else ''


class PathAlias(models.Model):
    """
    Human-friendly alias for a system path (/about-us -> /node/5).
    """

    path = models.CharField(max_length=255, db_index=True, help_text='System path, e.g. /node/5')
    alias = models.CharField(max_length=255, unique=True, help_text='Alias served to visitors, e.g. /about-us')

    class Meta:
        verbose_name_plural = 'Path aliases'
        ordering = ['alias']

    def __str__(self):
        return f"{self.alias} -> {self.path}"
