"""
Lock decision for a request path.

The order is fixed: bypass capability, wildcard rules, exact rules, session
check, then a second pass against the entity path (``/node/<id>``) when the
requested path itself gave nothing. A path no rule can lock is let through
before the user or the session is consulted.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from .capabilities import BYPASS, PermissionChecker
from .conf import PasswordMode
from .matching import match_path, parse_id
from .session import GLOBAL_KEY
from .storage import AliasManager, ProtectedPageStorage

logger = logging.getLogger(__name__)

LOGIN_PATH = "/protected-page"


@dataclass(frozen=True)
class LockDecision:
    locked: bool
    protected_page_id: Optional[int] = None

    @classmethod
    def unlocked(cls):
        return cls(locked=False)


@dataclass(frozen=True)
class PageMatch:
    pid: int
    rule: str  # "wildcard" or "exact"


def entity_from_request(request, config):
    """(collection, id) of the entity the resolved view renders, if any."""
    match = getattr(request, "resolver_match", None)
    if match is None:
        return None
    for kwarg, collection in config.entity_kwargs.items():
        value = match.kwargs.get(kwarg)
        entity_id = parse_id(getattr(value, "pk", value))
        if entity_id is not None:
            return collection, entity_id
    return None


class AccessGate:
    def __init__(self, storage=None, aliases=None, capabilities=None, clock=time.time, login_path=LOGIN_PATH):
        self.storage = storage or ProtectedPageStorage()
        self.aliases = aliases or AliasManager()
        self.capabilities = capabilities or PermissionChecker()
        self.clock = clock
        self.login_path = login_path

    def resolve(self, path):
        """Alias form and lower-cased canonical form of ``path``."""
        current_path = self.aliases.get_alias_by_path(self.aliases.get_path_by_alias(path))
        normal_path = self.aliases.get_path_by_alias(current_path).lower()
        return current_path, normal_path

    def match_protected_page(self, current_path, normal_path, config) -> Optional[PageMatch]:
        match = None
        for page in self.storage.load_all():
            if current_path != self.login_path and match_path(current_path, page.path, config.front_page):
                match = PageMatch(page.pk, "wildcard")
                break

        if match is None:
            pid = self.storage.load_one("id", paths=[normal_path, current_path])
            if pid:
                match = PageMatch(pid, "exact")

        if match:
            logger.debug("%s matched protected page %s (%s)", current_path, match.pid, match.rule)
        return match

    def session_key(self, pid, config):
        if config.mode == PasswordMode.GLOBAL_ONLY:
            return GLOBAL_KEY
        return pid

    def lock_for_match(self, match, state, config) -> Optional[int]:
        pid = match.pid if match else None
        key = self.session_key(pid, config)
        if key is not None and state.is_unlocked(key, self.clock()):
            return None
        return pid

    def is_page_locked(self, current_path, normal_path, state, config) -> Optional[int]:
        """Id of the rule still locking this path, or None."""
        return self.lock_for_match(self.match_protected_page(current_path, normal_path, config), state, config)

    def evaluate(self, user, path, state, config, entity=None) -> LockDecision:
        current_path, normal_path = self.resolve(path)
        match = self.match_protected_page(current_path, normal_path, config)

        # nothing can lock this path, so leave the user and the session alone
        if match is None and entity is None and config.mode != PasswordMode.GLOBAL_ONLY:
            return LockDecision.unlocked()

        if self.capabilities.has_capability(user, BYPASS, config):
            return LockDecision.unlocked()

        pid = self.lock_for_match(match, state, config)

        if not pid and entity is not None:
            collection, entity_id = entity
            current_path = self.aliases.get_alias_by_path(f"/{collection}/{entity_id}").lower()
            normal_path = self.aliases.get_path_by_alias(current_path).lower()
            pid = self.is_page_locked(current_path, normal_path, state, config)

        if pid:
            return LockDecision(locked=True, protected_page_id=pid)
        return LockDecision.unlocked()
