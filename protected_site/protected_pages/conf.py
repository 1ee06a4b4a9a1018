"""
Typed view of ``settings.PROTECTED_PAGES``.

Keys follow the exported module configuration (``password.*`` and
``others.*``) so existing exports can be pasted in unchanged.
"""

from enum import Enum
from typing import Dict, List, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pydantic import BaseModel, Field, ValidationError


class PasswordMode(str, Enum):
    GLOBAL_ONLY = "only_global"
    PER_PAGE_ONLY = "per_page_password"
    PER_PAGE_OR_GLOBAL = "per_page_or_global"


class PasswordSettings(BaseModel):
    per_page_or_global: PasswordMode = PasswordMode.PER_PAGE_OR_GLOBAL
    protected_pages_global_password: str = ""
    # minutes; 0 or None keeps the unlock for the whole session
    protected_pages_session_expire_time: Optional[int] = Field(default=None, ge=0)


class TextSettings(BaseModel):
    protected_pages_title: str = "Protected Page -- Enter password"
    protected_pages_description: str = (
        "The page you are trying to view is password protected. "
        "Please enter the password below to proceed."
    )
    protected_pages_password_label: str = "Enter Password"
    protected_pages_submit_button_text: str = "Authenticate"
    protected_pages_incorrect_password_msg: str = "Incorrect password!"


class ProtectedPagesSettings(BaseModel):
    password: PasswordSettings = Field(default_factory=PasswordSettings)
    others: TextSettings = Field(default_factory=TextSettings)
    anonymous_permissions: List[str] = Field(default_factory=lambda: ["access_login_screen"])
    entity_kwargs: Dict[str, str] = Field(default_factory=lambda: {"node": "node"})
    front_page: str = "/"
    login_redirect: str = "/"

    @property
    def mode(self) -> PasswordMode:
        return self.password.per_page_or_global

    @property
    def global_password(self) -> str:
        return self.password.protected_pages_global_password

    @property
    def expire_minutes(self) -> int:
        return self.password.protected_pages_session_expire_time or 0


def get_settings() -> ProtectedPagesSettings:
    """Validate and return the current ``PROTECTED_PAGES`` block."""
    raw = getattr(settings, "PROTECTED_PAGES", None) or {}
    try:
        return ProtectedPagesSettings.model_validate(raw)
    except ValidationError as e:
        problems = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ImproperlyConfigured(f"Invalid PROTECTED_PAGES setting ({problems}): {e}") from e
