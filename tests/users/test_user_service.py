from __future__ import annotations

import pytest

from timeclock.core.enums import Role
from timeclock.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


def _create(container, actor, **overrides):
    data = dict(email="new@example.com", password="secret1", name="New", role="agent")
    data.update(overrides)
    return container.user_service.create_user(actor=actor, **data)


def test_agents_cannot_create_users(container, make_user, session_of):
    agent = make_user()

    with pytest.raises(AuthorizationError, match="Agents cannot create users"):
        _create(container, session_of(agent))


def test_admins_can_only_create_agents(container, make_user, session_of):
    admin = make_user(Role.ADMIN)

    with pytest.raises(AuthorizationError, match="Admins can only create agents"):
        _create(container, session_of(admin), role="admin")


def test_admin_created_agent_is_assigned_to_admin(container, make_user, session_of):
    admin = make_user(Role.ADMIN, team="Sales")

    user = _create(container, session_of(admin), team="Sales")

    assert user.role == Role.AGENT
    assert user.assigned_to == admin.user_id
    assert container.users_repo.get_by_id(user.user_id) == user


def test_superadmin_creates_admin_and_assigned_agent(container, make_user, session_of):
    boss = session_of(make_user(Role.SUPERADMIN))

    admin = _create(container, boss, email="lead@example.com", role="admin", team="Support")
    agent = _create(container, boss, email="agent@example.com", assigned_to=admin.user_id)

    assert admin.role == Role.ADMIN
    assert admin.assigned_to is None
    assert agent.assigned_to == admin.user_id


def test_superadmin_cannot_create_another_superadmin(container, make_user, session_of):
    boss = session_of(make_user(Role.SUPERADMIN))

    with pytest.raises(AuthorizationError):
        _create(container, boss, role="superadmin")


def test_create_user_validation(container, make_user, session_of):
    boss = session_of(make_user(Role.SUPERADMIN))
    make_user(email="taken@example.com")

    with pytest.raises(ConflictError, match="User already exists"):
        _create(container, boss, email="TAKEN@example.com")
    with pytest.raises(ValidationError):
        _create(container, boss, role="manager")
    with pytest.raises(ValidationError):
        _create(container, boss, email="not-an-email")
    with pytest.raises(ValidationError):
        _create(container, boss, assigned_to="missing-admin")


def test_reset_password_is_superadmin_only(container, make_user, session_of):
    admin = make_user(Role.ADMIN)
    agent = make_user(email="alice@example.com", password="secret1")

    with pytest.raises(AuthenticationError):
        container.user_service.reset_password(actor=session_of(admin), user_id=agent.user_id, new_password="newpass")


def test_reset_password_allows_login_with_new_password(container, make_user, session_of):
    boss = session_of(make_user(Role.SUPERADMIN))
    agent = make_user(email="alice@example.com", password="secret1")

    container.user_service.reset_password(actor=boss, user_id=agent.user_id, new_password="changed1")

    assert container.auth_service.login(email="alice@example.com", password="changed1").user["id"] == agent.user_id
    with pytest.raises(AuthenticationError):
        container.auth_service.login(email="alice@example.com", password="secret1")


def test_reset_password_unknown_user(container, make_user, session_of):
    boss = session_of(make_user(Role.SUPERADMIN))

    with pytest.raises(NotFoundError):
        container.user_service.reset_password(actor=boss, user_id="missing", new_password="changed1")


def test_list_users_is_role_scoped(container, make_user, session_of):
    boss = make_user(Role.SUPERADMIN)
    admin_a = make_user(Role.ADMIN)
    admin_b = make_user(Role.ADMIN)
    mine = make_user(assigned_to=admin_a.user_id)
    make_user(assigned_to=admin_b.user_id)

    everyone = container.user_service.list_users(actor=session_of(boss))
    admin_view = container.user_service.list_users(actor=session_of(admin_a))
    agent_view = container.user_service.list_users(actor=session_of(mine))

    assert len(everyone) == 5
    assert {u["id"] for u in admin_view} == {admin_a.user_id, mine.user_id}
    assert [u["id"] for u in agent_view] == [mine.user_id]
    assert all("passwordHash" not in u for u in everyone)


def test_list_teams_is_distinct(container, make_user):
    make_user(team="Sales")
    make_user(team="Support")
    make_user(team="Sales")
    make_user()

    assert sorted(container.user_service.list_teams()) == ["Sales", "Support"]
