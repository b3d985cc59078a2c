"""
Views for registration, login, logout, and the current user.

A successful register or login binds the user to a server-side session
(cookie-referenced); every other endpoint in the API authenticates from
that session via ``SessionUserAuthentication``.
"""

import logging

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .authentication import end_session, start_session
from .exceptions import InvalidCredentials
from .serializers import CredentialsSerializer, UserSerializer
from .store import get_credential_store

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------
class RegisterView(APIView):
    """
    POST /api/register

    Creates a new account and logs it in immediately.
    Duplicate usernames are rejected with 400.
    """

    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CredentialsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        username = serializer.validated_data["username"]
        logger.info("Registration attempt for username: %s", username)

        user = get_credential_store().create_user(
            username, serializer.validated_data["password"]
        )
        start_session(request, user)

        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------
class LoginView(APIView):
    """
    POST /api/login

    Verifies credentials and establishes a session.  Unknown usernames
    and wrong passwords get the same 401.
    """

    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CredentialsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        username = serializer.validated_data["username"]
        logger.info("Login attempt for username: %s", username)

        user = get_credential_store().authenticate(
            username, serializer.validated_data["password"]
        )
        if user is None:
            raise InvalidCredentials()

        start_session(request, user)
        logger.info("Login successful for user: %s", user.id)
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# Logout
# ---------------------------------------------------------------------------
class LogoutView(APIView):
    """
    POST /api/logout

    Flushes the session.  Calling it without a session is harmless and
    still returns 200.
    """

    permission_classes = [AllowAny]

    def post(self, request):
        user_id = request.user.id if request.user else None
        end_session(request)
        logger.info("Logout for user: %s", user_id)
        return Response(status=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# Current user
# ---------------------------------------------------------------------------
class CurrentUserView(APIView):
    """GET /api/user → the session's user, 401 without a session."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)
