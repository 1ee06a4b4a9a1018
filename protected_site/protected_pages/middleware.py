import logging
from urllib.parse import urlencode

from django.shortcuts import redirect
from django.urls import reverse
from django.utils.cache import add_never_cache_headers
from django.utils.deprecation import MiddlewareMixin

from .conf import get_settings
from .gate import AccessGate, entity_from_request
from .session import UnlockState

logger = logging.getLogger(__name__)


class ProtectedPagesMiddleware(MiddlewareMixin):
    """
    Swap the response for a redirect to the password screen while the
    requested page is still locked for this session.
    """

    def __init__(self, get_response):
        super().__init__(get_response)
        self.gate = AccessGate()

    def process_response(self, request, response):
        session = getattr(request, "session", None)
        if session is None:
            return response

        config = get_settings()
        state = UnlockState.from_session(session)
        decision = self.gate.evaluate(
            getattr(request, "user", None),
            request.path_info,
            state,
            config,
            entity=entity_from_request(request, config),
        )
        # expired markers get dropped even when the page ends up unlocked
        state.save(session)

        if not decision.locked:
            return response
        return self.redirect_to_login(request, decision.protected_page_id)

    def redirect_to_login(self, request, pid):
        destination = request.GET.get("destination") or request.get_full_path()
        q = urlencode({"protected_page": pid, "destination": destination})
        logger.info("Page %s locked by protected page %s, redirecting", request.path_info, pid)
        response = redirect(f"{reverse('protected_pages:login')}?{q}")
        add_never_cache_headers(response)
        return response
