"""
Credential checks and the unlock transition behind the password screen.
"""

import logging
import time

from django.contrib.auth.hashers import check_password

from .capabilities import ACCESS_LOGIN_SCREEN, PermissionChecker, is_super_user
from .conf import PasswordMode
from .matching import parse_id
from .session import GLOBAL_KEY
from .storage import ProtectedPageStorage

logger = logging.getLogger(__name__)


class InvalidPassword(Exception):
    """Submitted password did not satisfy the configured policy."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


def verify(plain, hashed):
    # check_password chokes on a missing hash
    if not hashed:
        return False
    return check_password(plain, hashed)


class LoginHandler:
    def __init__(self, storage=None, capabilities=None, clock=time.time):
        self.storage = storage or ProtectedPageStorage()
        self.capabilities = capabilities or PermissionChecker()
        self.clock = clock

    def can_access(self, user, raw_page_id, config):
        if parse_id(raw_page_id) is None:
            return False
        return self.capabilities.has_capability(user, ACCESS_LOGIN_SCREEN, config) or is_super_user(user)

    def validate(self, password, page_id, config):
        """
        Check ``password`` for ``page_id`` and return the session key to
        unlock. Raises InvalidPassword with the configured message.
        """
        mode = config.mode
        key = page_id

        if mode == PasswordMode.PER_PAGE_ONLY:
            ok = verify(password, self.storage.load_password(page_id))
        elif mode == PasswordMode.PER_PAGE_OR_GLOBAL:
            ok = (verify(password, self.storage.load_password(page_id))
                  or verify(password, config.global_password))
        else:
            ok = verify(password, config.global_password)
            key = GLOBAL_KEY

        if not ok:
            logger.warning("Rejected password for protected page %s", page_id)
            raise InvalidPassword(config.others.protected_pages_incorrect_password_msg)
        return key

    def submit(self, state, key, config):
        entry = state.unlock(key, self.clock(), config.expire_minutes)
        logger.info("Unlocked protected page key %s (expires %s)", key, entry.get("expire_time", "with session"))
        return entry
