from django.core.exceptions import PermissionDenied
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_POST

from .conf import get_settings
from .forms import ProtectedPageLoginForm
from .login import LoginHandler
from .matching import parse_id
from .session import UnlockState

handler = LoginHandler()


def _safe_destination(request, config):
    nxt = request.GET.get("destination")
    if nxt and url_has_allowed_host_and_scheme(nxt, allowed_hosts={request.get_host()},
                                               require_https=request.is_secure()):
        return nxt
    return config.login_redirect


@never_cache
def login_view(request):
    config = get_settings()
    raw_pid = request.GET.get("protected_page")
    if not handler.can_access(getattr(request, "user", None), raw_pid, config):
        raise PermissionDenied

    form = ProtectedPageLoginForm(
        request.POST or None,
        handler=handler,
        config=config,
        protected_page=parse_id(raw_pid),
    )
    if request.method == "POST" and form.is_valid():
        state = UnlockState.from_session(request.session)
        handler.submit(state, form.unlock_key, config)
        state.save(request.session)
        return redirect(_safe_destination(request, config))

    return render(request, "protected_pages/login.html", {
        "form": form,
        "title": config.others.protected_pages_title,
        "description": config.others.protected_pages_description,
        "submit_text": config.others.protected_pages_submit_button_text,
    })


@require_POST
def lock_view(request):
    state = UnlockState.from_session(request.session)
    state.clear()
    state.save(request.session)
    return redirect(get_settings().login_redirect)
