"""API exceptions raised by the accounts app."""

from rest_framework import status
from rest_framework.exceptions import APIException, AuthenticationFailed


class ConflictError(APIException):
    """Registration with a username that already exists."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Username already exists."
    default_code = "conflict"


class InvalidCredentials(AuthenticationFailed):
    default_detail = "Invalid username or password."
    default_code = "invalid_credentials"
