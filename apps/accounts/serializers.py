"""
Serializers for registration, login, and the current-user payload.

Users are plain store records rather than Django models, so these are
``serializers.Serializer`` subclasses rather than ModelSerializers.
"""

from rest_framework import serializers


# ---------------------------------------------------------------------------
# Register / Login
# ---------------------------------------------------------------------------
class CredentialsSerializer(serializers.Serializer):
    """
    ``{username, password}`` body shared by /register and /login.

    Whitespace is preserved: usernames match exactly and passwords are
    hashed as typed.
    """

    username = serializers.CharField(max_length=150, trim_whitespace=False)
    password = serializers.CharField(
        max_length=4096, write_only=True, trim_whitespace=False
    )


# ---------------------------------------------------------------------------
# User (read-only)
# ---------------------------------------------------------------------------
class UserSerializer(serializers.Serializer):
    """Client-facing user representation.  The password hash is never included."""

    id = serializers.IntegerField(read_only=True)
    username = serializers.CharField(read_only=True)
