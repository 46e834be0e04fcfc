from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from timeclock.auth.service import AuthService
from timeclock.core.enums import Role
from timeclock.core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError

NOW = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def test_register_creates_unassigned_agent_and_session(container):
    grant = container.auth_service.register(email="New.Agent@Example.com", password="secret1", name="New Agent")

    assert grant.user["email"] == "new.agent@example.com"
    assert grant.user["role"] == "agent"
    assert grant.user["assignedTo"] is None
    assert "passwordHash" not in grant.user

    session = container.auth_service.verify_session(grant.session_id)
    assert session.user_id == grant.user["id"]
    assert session.role == Role.AGENT


def test_register_rejects_duplicate_email_case_insensitively(container, make_user):
    make_user(email="alice@example.com")

    with pytest.raises(ConflictError, match="User already exists"):
        container.auth_service.register(email="ALICE@example.com", password="secret1", name="Alice")


def test_register_rejects_short_password(container):
    with pytest.raises(ValidationError):
        container.auth_service.register(email="bob@example.com", password="123", name="Bob")


def test_login_failures_are_indistinguishable(container, make_user):
    make_user(email="alice@example.com", password="secret1")

    with pytest.raises(AuthenticationError) as wrong_password:
        container.auth_service.login(email="alice@example.com", password="nope")
    with pytest.raises(AuthenticationError) as unknown_email:
        container.auth_service.login(email="ghost@example.com", password="secret1")

    assert str(wrong_password.value) == str(unknown_email.value) == "Invalid credentials"


@pytest.mark.parametrize("password", [123, None, b"secret1"])
def test_login_with_non_string_password_fails_like_a_wrong_one(container, make_user, password):
    make_user(email="alice@example.com", password="secret1")

    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        container.auth_service.login(email="alice@example.com", password=password)


def test_login_then_logout(container, make_user):
    make_user(email="alice@example.com", password="secret1")

    grant = container.auth_service.login(email="Alice@example.com", password="secret1")
    assert container.auth_service.verify_session(grant.session_id) is not None

    container.auth_service.logout(grant.session_id)
    assert container.auth_service.verify_session(grant.session_id) is None


def test_verify_session_without_token(container):
    assert container.auth_service.verify_session(None) is None
    assert container.auth_service.verify_session("unknown") is None


def test_sessions_expire_when_ttl_is_set(container, make_user):
    make_user(email="alice@example.com", password="secret1")
    auth = AuthService(container.users_repo, container.sessions_repo, session_ttl_hours=1)

    grant = auth.login(email="alice@example.com", password="secret1", now=NOW)

    assert auth.verify_session(grant.session_id, now=NOW + timedelta(minutes=30)) is not None
    assert auth.verify_session(grant.session_id, now=NOW + timedelta(hours=2)) is None
    assert container.sessions_repo.get(grant.session_id) is None


def test_sessions_never_expire_by_default(container, make_user):
    make_user(email="alice@example.com", password="secret1")
    grant = container.auth_service.login(email="alice@example.com", password="secret1", now=NOW)

    assert container.auth_service.verify_session(grant.session_id, now=NOW + timedelta(days=365)) is not None


def _superadmin_grant(container, make_user):
    make_user(Role.SUPERADMIN, email="boss@example.com", name="Boss", password="secret1")
    grant = container.auth_service.login(email="boss@example.com", password="secret1")
    return grant, container.auth_service.verify_session(grant.session_id)


def test_impersonation_round_trip(container, make_user):
    agent = make_user(name="Alice", team="Sales")
    grant, boss = _superadmin_grant(container, make_user)

    imp = container.auth_service.impersonate(
        actor=boss,
        actor_session_id=grant.session_id,
        target_user_id=agent.user_id,
    )
    assert imp.session_id != grant.session_id
    assert imp.user["id"] == agent.user_id
    assert imp.user["isImpersonating"] is True

    imp_session = container.auth_service.verify_session(imp.session_id)
    assert imp_session.user_id == agent.user_id
    assert imp_session.is_impersonating
    assert imp_session.original_session_id == grant.session_id
    assert imp_session.original_user_id == boss.user_id

    back = container.auth_service.exit_impersonation(session=imp_session, session_id=imp.session_id)
    assert back.session_id == grant.session_id
    assert back.user["id"] == boss.user_id
    assert container.auth_service.verify_session(imp.session_id) is None
    assert container.auth_service.verify_session(grant.session_id) is not None


def test_only_superadmin_can_impersonate(container, make_user, session_of):
    admin = make_user(Role.ADMIN)
    agent = make_user()

    with pytest.raises(AuthenticationError, match="Only super admin can impersonate"):
        container.auth_service.impersonate(
            actor=session_of(admin),
            actor_session_id="s1",
            target_user_id=agent.user_id,
        )


def test_impersonating_unknown_user(container, make_user):
    grant, boss = _superadmin_grant(container, make_user)

    with pytest.raises(NotFoundError):
        container.auth_service.impersonate(actor=boss, actor_session_id=grant.session_id, target_user_id="missing")


def test_exit_impersonation_requires_impersonated_session(container, make_user, session_of):
    agent = make_user()

    with pytest.raises(ValidationError, match="Not impersonating"):
        container.auth_service.exit_impersonation(session=session_of(agent), session_id="s1")


def test_exit_impersonation_after_original_logout(container, make_user):
    agent = make_user()
    grant, boss = _superadmin_grant(container, make_user)
    imp = container.auth_service.impersonate(actor=boss, actor_session_id=grant.session_id, target_user_id=agent.user_id)

    # Logging out the original session leaves the impersonation session alive.
    container.auth_service.logout(grant.session_id)
    imp_session = container.auth_service.verify_session(imp.session_id)
    assert imp_session is not None

    with pytest.raises(NotFoundError, match="Original session not found"):
        container.auth_service.exit_impersonation(session=imp_session, session_id=imp.session_id)
