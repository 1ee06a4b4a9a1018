BYPASS = "bypass pages password protection"
ACCESS_LOGIN_SCREEN = "access protected page password screen"

CODENAMES = {
    BYPASS: "bypass_protection",
    ACCESS_LOGIN_SCREEN: "access_login_screen",
}


def is_super_user(user):
    return bool(user is not None and getattr(user, "is_superuser", False))


class PermissionChecker:
    """
    Map capability names onto Django permissions of this app.

    Codenames listed in ``anonymous_permissions`` count as granted to every
    visitor, which is how the login screen stays reachable when signed out.
    """

    app_label = "protected_pages"

    def has_capability(self, user, name, config):
        codename = CODENAMES[name]
        if codename in config.anonymous_permissions:
            return True
        if user is None or not getattr(user, "is_active", False):
            return False
        return user.has_perm(f"{self.app_label}.{codename}")
