"""
Session-based authentication for DRF.

The session (Django ``SessionMiddleware``) holds only the user id under
``SESSION_USER_KEY``; every request resolves it against the credential
store.  ``start_session`` / ``end_session`` mirror what
``django.contrib.auth.login`` / ``logout`` do for model-backed users,
including rotating the CSRF token on login.

Like DRF's own ``SessionAuthentication``, an authenticated session must
carry a valid CSRF token (``X-CSRFToken`` header, value of the
``csrftoken`` cookie) on unsafe methods.
"""

import logging

from django.middleware.csrf import rotate_token
from rest_framework.authentication import SessionAuthentication

from .store import get_credential_store

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "_user_id"


class SessionUserAuthentication(SessionAuthentication):
    """
    Authenticate the request from the server-side session.

    Returns ``None`` (anonymous) when there is no session, or when the
    session points at a user the store no longer knows.  Raises
    ``PermissionDenied`` (403) when an authenticated unsafe request fails
    the CSRF check.
    """

    def authenticate(self, request):
        session = getattr(request._request, "session", None)
        if session is None:
            return None

        user_id = session.get(SESSION_USER_KEY)
        if user_id is None:
            return None

        user = get_credential_store().get_user(user_id)
        if user is None:
            logger.info("Session references unknown user %s", user_id)
            return None

        self.enforce_csrf(request)
        return (user, None)

    def authenticate_header(self, request):
        # A challenge makes DRF answer 401 rather than 403
        return "Session"


def start_session(request, user):
    """Bind ``user`` to the request's session, rotating the session key."""
    session = request._request.session
    session.cycle_key()
    session[SESSION_USER_KEY] = user.id
    rotate_token(request._request)
    request.user = user


def end_session(request):
    """Discard all session data and the cookie's session key."""
    request._request.session.flush()
    request.user = None
