"""
In-memory credential store.

Holds user records keyed by a monotonically assigned integer id and
verifies passwords through Django's hasher framework (scrypt, see
``PASSWORD_HASHERS``).  Accounts are immutable once created.

The store instance lives on the accounts ``AppConfig``; use
``get_credential_store()`` rather than constructing one per request.
"""

import itertools
import logging
import threading
from dataclasses import dataclass

from django.apps import apps
from django.contrib.auth.hashers import check_password, make_password

from .exceptions import ConflictError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    """A registered account.  ``password`` is the encoded hash, never plaintext."""

    id: int
    username: str
    password: str

    # DRF's permission and throttle classes read these off request.user
    @property
    def pk(self):
        return self.id

    @property
    def is_authenticated(self):
        return True

    def __str__(self):
        return self.username


class CredentialStore:
    """Process-wide user table.  All mutations run under ``self._lock``."""

    def __init__(self):
        self._users: dict[int, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create_user(self, username: str, raw_password: str) -> User:
        """
        Register ``username`` with a freshly salted hash of ``raw_password``.

        Raises ``ConflictError`` if the username is taken (exact,
        case-sensitive match).
        """
        # Hash outside the lock: it's the slow part and touches no shared state
        encoded = make_password(raw_password)
        with self._lock:
            if self._find(username) is not None:
                raise ConflictError()
            user = User(id=next(self._ids), username=username, password=encoded)
            self._users[user.id] = user
        logger.info("Created user %s (%s)", user.id, username)
        return user

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self._find(username)

    def authenticate(self, username: str, raw_password: str) -> User | None:
        """
        Return the matching user if the password verifies, else ``None``.

        An unknown username still pays for one hash so the response time
        does not reveal which usernames exist.
        """
        user = self._find(username)
        if user is None:
            make_password(raw_password)
            logger.info("Login failed, unknown user: %s", username)
            return None
        if not check_password(raw_password, user.password):
            logger.info("Login failed, bad password for user %s", user.id)
            return None
        return user

    def _find(self, username):
        for user in list(self._users.values()):
            if user.username == username:
                return user
        return None


def get_credential_store():
    """Return the store built by ``AccountsConfig.ready()``."""
    return apps.get_app_config("accounts").store
