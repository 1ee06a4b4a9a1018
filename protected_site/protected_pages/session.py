"""
Per-session unlock state.

Layout inside the Django session::

    request.session["_protected_page"] = {
        "passwords": {
            "<key>": {"request_time": <epoch s>, "expire_time": <epoch s>},
        }
    }

``<key>`` is a protected page id, or ``0`` when the global password unlocked
everything. Keys are strings because sessions go through JSON.
"""

import logging

logger = logging.getLogger(__name__)

SESSION_KEY = "_protected_page"
GLOBAL_KEY = 0


class UnlockState:
    def __init__(self, passwords=None, session=None):
        # with a session, the stored map is read on first use only
        self._session = session
        self._passwords = None
        if session is None:
            self._passwords = {str(k): dict(v) for k, v in (passwords or {}).items()}
        self.changed = False

    @classmethod
    def from_session(cls, session):
        return cls(session=session)

    @property
    def passwords(self):
        if self._passwords is None:
            data = self._session.get(SESSION_KEY) or {}
            self._passwords = {str(k): dict(v) for k, v in (data.get("passwords") or {}).items()}
        return self._passwords

    def save(self, session):
        """Write back to ``session``; no-op when nothing changed."""
        if not self.changed:
            return
        session[SESSION_KEY] = {"passwords": self.as_dict()}
        self.changed = False

    def as_dict(self):
        return {k: dict(v) for k, v in self.passwords.items()}

    def get(self, key):
        if key is None:
            return None
        return self.passwords.get(str(key))

    def purge_expired(self, key, now):
        """Drop the markers for ``key`` once its expiry has passed."""
        entry = self.get(key)
        if not entry or entry.get("expire_time") is None:
            return False
        if now < entry["expire_time"]:
            return False
        entry.pop("request_time", None)
        entry.pop("expire_time", None)
        if not entry:
            del self.passwords[str(key)]
        self.changed = True
        logger.debug("Unlock for key %s expired, relocking", key)
        return True

    def is_unlocked(self, key, now):
        self.purge_expired(key, now)
        entry = self.get(key)
        return bool(entry) and entry.get("request_time") is not None

    def unlock(self, key, now, expire_minutes=None):
        entry = {"request_time": int(now)}
        if expire_minutes:
            entry["expire_time"] = int(now) + int(expire_minutes) * 60
        self.passwords[str(key)] = entry
        self.changed = True
        return entry

    def clear(self):
        if self.passwords:
            self._passwords = {}
            self.changed = True
