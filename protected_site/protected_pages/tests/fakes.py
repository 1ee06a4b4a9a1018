"""In-memory stand-ins for the database collaborators."""

from types import SimpleNamespace


class FakeStorage:
    def __init__(self, *pages):
        # pages: (id, path, password_hash)
        self.pages = [SimpleNamespace(pk=pid, id=pid, path=path, password=pw) for pid, path, pw in pages]

    def load_all(self):
        return sorted(self.pages, key=lambda p: p.pk)

    def load_one(self, field, pid=None, paths=None):
        for page in self.load_all():
            if pid is not None and page.pk != pid:
                continue
            if paths and page.path.lower() not in [p.lower() for p in paths]:
                continue
            return getattr(page, field)
        return None

    def load_password(self, pid):
        return self.load_one("password", pid=pid)


class FakeAliases:
    def __init__(self, aliases=None):
        # alias -> system path
        self.aliases = dict(aliases or {})

    def get_alias_by_path(self, path):
        for alias, system in self.aliases.items():
            if system.lower() == path.lower():
                return alias
        return path

    def get_path_by_alias(self, alias):
        for a, system in self.aliases.items():
            if a.lower() == alias.lower():
                return system
        return alias


class FakeUser:
    is_active = True
    is_superuser = False

    def __init__(self, *perms, superuser=False):
        self.perms = set(perms)
        self.is_superuser = superuser
        self.checked = []

    def has_perm(self, perm):
        self.checked.append(perm)
        return self.is_superuser or perm in self.perms


class CountingSession(dict):
    """Session stand-in that counts reads."""

    reads = 0

    def get(self, key, default=None):
        self.reads += 1
        return super().get(key, default)
