from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from timeclock.auth.model import Session
from timeclock.common.ids import generate_id
from timeclock.container import build_container
from timeclock.core.enums import Role
from timeclock.store.memory_store import InMemoryKeyValueStore
from timeclock.users.model import User


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def make_user(container):
    def _make(role=Role.AGENT, *, name="User", email=None, team=None, assigned_to=None, password="secret1"):
        user = User(
            user_id=generate_id(),
            email=email or f"{name.lower().replace(' ', '.')}.{generate_id()}@example.com",
            password_hash=generate_password_hash(password),
            role=Role(role),
            name=name,
            team=team,
            assigned_to=assigned_to,
        )
        container.users_repo.save(user)
        return user

    return _make


@pytest.fixture
def session_of():
    def _session(user):
        return Session.for_user(user, created_at="2024-05-01T00:00:00.000Z")

    return _session
