"""
Read-only lookups the gate and the login screen run against the database.
"""

from django.db.models import Q

from .models import PathAlias, ProtectedPage


class ProtectedPageStorage:
    """Query protected page rules by id or by path."""

    def load_all(self):
        return list(ProtectedPage.objects.only("id", "path").order_by("id"))

    def load_one(self, field, pid=None, paths=None):
        """
        Project ``field`` of the first rule with ``id == pid`` and/or a path
        equal to any of ``paths``. Returns None when nothing matches.
        """
        qs = ProtectedPage.objects.order_by("id")
        if pid is not None:
            qs = qs.filter(pk=pid)
        if paths:
            cond = Q()
            for p in paths:
                cond |= Q(path__iexact=p)
            qs = qs.filter(cond)
        return qs.values_list(field, flat=True).first()

    def load_password(self, pid):
        return self.load_one("password", pid=pid)


class AliasManager:
    """Translate between system paths and their aliases."""

    def get_alias_by_path(self, path):
        alias = PathAlias.objects.filter(path__iexact=path).order_by("-id").values_list("alias", flat=True).first()
        return alias or path

    def get_path_by_alias(self, alias):
        path = PathAlias.objects.filter(alias__iexact=alias).values_list("path", flat=True).first()
        return path or alias
