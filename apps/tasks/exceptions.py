"""API exceptions raised by the tasks app."""

from rest_framework.exceptions import NotFound


class NotFoundOrForbidden(NotFound):
    """
    The task does not exist or belongs to another user.

    Deliberately indistinguishable from a plain 404 so task ids owned by
    other users cannot be discovered.
    """
