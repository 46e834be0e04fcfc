from __future__ import annotations

from datetime import datetime, timezone

import pytest

from timeclock.core.constants import DEFAULT_ACTIVITIES, DEFAULT_BREAK_TYPES
from timeclock.core.enums import Role
from timeclock.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from timeclock.database.seed import ensure_seed_data

NOW = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def test_settings_are_empty_until_seeded(container, store):
    assert container.settings_service.get_settings() == {"breakTypes": [], "activities": []}

    ensure_seed_data(store)

    assert container.settings_service.get_settings() == {
        "breakTypes": list(DEFAULT_BREAK_TYPES),
        "activities": list(DEFAULT_ACTIVITIES),
    }


def test_only_superadmin_replaces_vocabularies(container, make_user, session_of):
    admin = session_of(make_user(Role.ADMIN))
    boss = session_of(make_user(Role.SUPERADMIN))

    with pytest.raises(AuthenticationError):
        container.settings_service.set_break_types(actor=admin, break_types=["Nap"])

    container.settings_service.set_break_types(actor=boss, break_types=["Nap", "Coffee Break"])
    container.settings_service.set_activities(actor=boss, activities=["Calls"])

    assert container.settings_service.get_settings() == {"breakTypes": ["Nap", "Coffee Break"], "activities": ["Calls"]}


def test_vocabularies_must_be_lists_of_strings(container, make_user, session_of):
    boss = session_of(make_user(Role.SUPERADMIN))

    with pytest.raises(ValidationError):
        container.settings_service.set_activities(actor=boss, activities="Calls")
    with pytest.raises(ValidationError):
        container.settings_service.set_break_types(actor=boss, break_types=["Nap", ""])


def test_schedule_crud(container, make_user, session_of):
    boss = session_of(make_user(Role.SUPERADMIN))
    admin = session_of(make_user(Role.ADMIN))
    svc = container.schedule_service

    created = svc.create(
        actor=boss,
        payload={"name": "Day shift", "start_time": "09:00", "end_time": "17:00", "break_types": ["Lunch Break"]},
        now=NOW,
    )
    assert created.to_dict()["createdAt"] == "2024-05-01T09:00:00.000Z"
    assert "updatedAt" not in created.to_dict()

    updated = svc.update(actor=boss, schedule_id=created.schedule_id, payload={"end_time": "18:00"}, now=NOW)
    assert updated.name == "Day shift"
    assert updated.start_time == "09:00"
    assert updated.end_time == "18:00"
    assert updated.break_types == ["Lunch Break"]
    assert updated.updated_at == "2024-05-01T09:00:00.000Z"

    listed = svc.list(actor=admin)
    assert [s["id"] for s in listed] == [created.schedule_id]
    assert listed[0]["end_time"] == "18:00"

    svc.delete(actor=boss, schedule_id=created.schedule_id)
    assert svc.list(actor=boss) == []


def test_schedule_permissions(container, make_user, session_of):
    admin = session_of(make_user(Role.ADMIN))
    agent = session_of(make_user())
    svc = container.schedule_service

    with pytest.raises(AuthenticationError):
        svc.list(actor=agent)
    with pytest.raises(AuthenticationError):
        svc.create(actor=admin, payload={"name": "Night"})
    with pytest.raises(AuthenticationError):
        svc.delete(actor=admin, schedule_id="anything")


def test_schedule_validation_and_missing_ids(container, make_user, session_of):
    boss = session_of(make_user(Role.SUPERADMIN))
    svc = container.schedule_service

    with pytest.raises(ValidationError):
        svc.create(actor=boss, payload={"start_time": "09:00"})
    with pytest.raises(ValidationError):
        svc.create(actor=boss, payload={"name": "Late", "start_time": "25:00"})
    with pytest.raises(NotFoundError, match="Schedule not found"):
        svc.update(actor=boss, schedule_id="missing", payload={"name": "x"})
    with pytest.raises(NotFoundError, match="Schedule not found"):
        svc.delete(actor=boss, schedule_id="missing")
