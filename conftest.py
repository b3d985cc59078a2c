"""
Root conftest — shared pytest fixtures and factory-boy factories.

There is no database: every test gets fresh in-memory stores (swapped
onto the app configs) and an empty cache, which also clears sessions
and throttle counters.
"""

import pytest
from django.apps import apps
from django.core.cache import cache
from rest_framework.test import APIClient

import factory
from apps.accounts.store import CredentialStore, User, get_credential_store
from apps.tasks.store import Task, TaskStore, get_task_store

DEFAULT_PASSWORD = "TestPass123!"


# ===================================================================
# Factories
# ===================================================================

class UserFactory(factory.Factory):
    """Register a user in the current credential store."""

    class Meta:
        model = User

    username = factory.Sequence(lambda n: f"testuser{n}")
    password = DEFAULT_PASSWORD

    @classmethod
    def _create(cls, model_class, username, password):
        return get_credential_store().create_user(username, password)


class TaskPayloadFactory(factory.DictFactory):
    """JSON body for POST /api/tasks."""

    title = factory.Sequence(lambda n: f"Task {n}")
    description = "A test task"
    category = "Work"


class TaskFactory(factory.Factory):
    """Create a Task owned by a given user, straight through the store."""

    class Meta:
        model = Task

    title = factory.Sequence(lambda n: f"Task {n}")
    description = "A test task"
    category = "Work"
    user = factory.SubFactory(UserFactory)

    @classmethod
    def _create(cls, model_class, user, **fields):
        return get_task_store().create_task(user.id, fields)


# ===================================================================
# Fixtures
# ===================================================================

@pytest.fixture(autouse=True)
def fresh_stores(monkeypatch):
    """Isolate every test with empty stores and an empty cache."""
    monkeypatch.setattr(apps.get_app_config("accounts"), "store", CredentialStore())
    monkeypatch.setattr(apps.get_app_config("tasks"), "store", TaskStore())
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Unauthenticated DRF test client."""
    return APIClient()


def login_client(user, password=DEFAULT_PASSWORD):
    """Return a client holding a real session cookie for ``user``."""
    client = APIClient()
    r = client.post(
        "/api/login",
        {"username": user.username, "password": password},
        format="json",
    )
    assert r.status_code == 200, r.content
    return client


@pytest.fixture
def user():
    """A registered User (password: TestPass123!)."""
    return UserFactory()


@pytest.fixture
def other_user():
    """A second user for cross-user isolation tests."""
    return UserFactory()


@pytest.fixture
def auth_client(user):
    """Session-authenticated client for ``user``."""
    return login_client(user)


@pytest.fixture
def other_auth_client(other_user):
    """Session-authenticated client for ``other_user``."""
    return login_client(other_user)


@pytest.fixture
def task(user):
    """A Task owned by ``user``."""
    return TaskFactory(user=user)
