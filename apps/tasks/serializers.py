"""
Serializers for Task.

Tasks are store records (frozen dataclasses), not Django models, so the
serializers are plain ``Serializer`` subclasses.  The wire format is
camelCase (``userId``, ``dueDate``, ``createdAt``); ``source=`` maps
each key onto the snake_case attribute the store uses.

  - ``TaskSerializer``: read-only representation returned to clients
  - ``TaskWriteSerializer``: body of POST (full) and PATCH (``partial=True``)
"""

from rest_framework import serializers

from .store import parse_due_date


# ---------------------------------------------------------------------------
# Task (read)
# ---------------------------------------------------------------------------
class TaskSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    userId = serializers.IntegerField(source="user_id", read_only=True)
    title = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True, allow_null=True)
    dueDate = serializers.DateTimeField(source="due_date", read_only=True, allow_null=True)
    completed = serializers.BooleanField(read_only=True)
    category = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)


# ---------------------------------------------------------------------------
# Task (create / partial update)
# ---------------------------------------------------------------------------
class TaskWriteSerializer(serializers.Serializer):
    """
    Task fields a client may send.

    ``id``, ``userId`` and ``createdAt`` are not declared, so DRF drops
    them from the input.  Ownership always comes from the session.
    ``dueDate`` is an ISO-8601 date or datetime string; an empty string
    or null clears it.  The store does the actual parsing.
    """

    title = serializers.CharField()
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    dueDate = serializers.CharField(
        source="due_date", required=False, allow_null=True, allow_blank=True
    )
    completed = serializers.BooleanField(required=False)
    category = serializers.CharField()

    def validate_dueDate(self, value):
        if not value:
            return None
        try:
            parse_due_date(value)
        except (ValueError, OverflowError):
            raise serializers.ValidationError(
                "Enter an ISO-8601 date, e.g. 2024-06-01."
            )
        return value
