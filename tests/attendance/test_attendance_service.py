from __future__ import annotations

from datetime import datetime, timezone

import pytest

from timeclock.attendance.model import DeviceInfo
from timeclock.attendance.service import AttendanceService
from timeclock.common.ids import generate_id
from timeclock.core.enums import RecordStatus, RequestStatus, Role
from timeclock.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from timeclock.requests.model import LeaveRequest


def at(hour, minute=0, *, day=1, month=5):
    return datetime(2024, month, day, hour, minute, tzinfo=timezone.utc)


def test_full_working_day(container):
    svc = container.attendance_service

    att = svc.clock_in("u1", activity="Chat Support", now=at(9))
    brk = svc.start_break("u1", break_type="Coffee Break", activity="Chat Support", now=at(10))
    svc.end_break("u1", break_id=brk.break_id, activity="Email Support", now=at(10, 15))
    done = svc.clock_out("u1", now=at(17))

    assert done.attendance_id == att.attendance_id
    assert done.date == "2024-05-01"
    assert done.login_time == "2024-05-01T09:00:00.000Z"
    assert done.logout_time == "2024-05-01T17:00:00.000Z"
    assert done.status == RecordStatus.COMPLETED

    ended = container.breaks_repo.get("u1", brk.break_id)
    assert ended.start_time == "2024-05-01T10:00:00.000Z"
    assert ended.end_time == "2024-05-01T10:15:00.000Z"
    assert ended.status == RecordStatus.COMPLETED
    assert ended.to_dict()["resumeActivity"] == "Email Support"
    assert svc.get_current_break("u1") is None


def test_second_clock_in_replaces_the_days_record(container):
    svc = container.attendance_service

    first = svc.clock_in("u1", activity="Available", now=at(9))
    svc.clock_out("u1", now=at(10))
    second = svc.clock_in("u1", activity="Meeting", now=at(11))

    rows = container.attendance_repo.list_for_user("u1")
    assert len(rows) == 1
    assert rows[0].attendance_id == second.attendance_id != first.attendance_id
    assert rows[0].login_time == "2024-05-01T11:00:00.000Z"
    assert rows[0].activity == "Meeting"
    assert rows[0].logout_time is None
    assert rows[0].status == RecordStatus.ACTIVE


def test_clock_in_records_device_and_defaults(container):
    svc = container.attendance_service

    plain = svc.clock_in("u1", activity="Available", now=at(9))
    assert (plain.device_name, plain.device_type, plain.device_os, plain.ip_address) == (
        "Unknown Device",
        "Unknown",
        "Unknown",
        "Unknown",
    )

    device = DeviceInfo(name="ThinkPad", type="Laptop", os="Windows 11", ip_address="10.0.0.7")
    rec = svc.clock_in("u2", activity="Available", device=device, now=at(9))
    assert rec.to_dict()["deviceOS"] == "Windows 11"
    assert rec.to_dict()["ipAddress"] == "10.0.0.7"


def test_clock_in_requires_activity(container):
    with pytest.raises(ValidationError):
        container.attendance_service.clock_in("u1", activity="  ", now=at(9))


def test_clock_out_without_record(container):
    with pytest.raises(NotFoundError, match="No active attendance found"):
        container.attendance_service.clock_out("u1", now=at(17))


def test_clock_out_only_looks_at_the_current_utc_day(container):
    svc = container.attendance_service
    svc.clock_in("u1", activity="Available", now=at(22))

    with pytest.raises(NotFoundError):
        svc.clock_out("u1", now=at(1, day=2))


def test_update_activity(container):
    svc = container.attendance_service

    with pytest.raises(NotFoundError, match="Please clock in first"):
        svc.update_activity("u1", activity="Training", now=at(9))

    svc.clock_in("u1", activity="Available", now=at(9))
    svc.update_activity("u1", activity="Training", now=at(10))

    assert svc.get_current_attendance("u1", now=at(11)).activity == "Training"


def test_two_active_breaks_can_coexist_by_default(container):
    svc = container.attendance_service

    first = svc.start_break("u1", break_type="Coffee Break", now=at(10))
    second = svc.start_break("u1", break_type="Lunch Break", now=at(10, 5))

    active = [b for b in container.breaks_repo.list_for_user("u1") if b.is_active]
    assert {b.break_id for b in active} == {first.break_id, second.break_id}
    assert svc.get_current_break("u1").break_id in {first.break_id, second.break_id}


def test_single_active_break_can_be_enforced(container):
    svc = AttendanceService(
        container.attendance_repo,
        container.breaks_repo,
        container.requests_repo,
        single_active_break=True,
    )

    brk = svc.start_break("u1", break_type="Coffee Break", now=at(10))
    with pytest.raises(ValidationError, match="already active"):
        svc.start_break("u1", break_type="Lunch Break", now=at(10, 5))

    svc.end_break("u1", break_id=brk.break_id, now=at(10, 15))
    svc.start_break("u1", break_type="Lunch Break", now=at(12))


def test_end_break_unknown_or_foreign(container):
    svc = container.attendance_service
    brk = svc.start_break("u1", break_type="Coffee Break", now=at(10))

    with pytest.raises(NotFoundError, match="Break not found"):
        svc.end_break("u1", break_id="missing", now=at(10, 15))
    with pytest.raises(NotFoundError):
        svc.end_break("u2", break_id=brk.break_id, now=at(10, 15))


def _leave(user_id, status, start="2024-05-20", end="2024-05-21"):
    return LeaveRequest(
        request_id=generate_id(),
        user_id=user_id,
        user_name="Alice",
        start_date=start,
        end_date=end,
        reason="Trip",
        status=status,
        assigned_to=None,
        created_at="2024-05-01T08:00:00.000Z",
    )


def test_month_view(container, make_user, session_of):
    agent = make_user()
    admin = make_user(Role.ADMIN)
    svc = container.attendance_service

    svc.clock_in(agent.user_id, activity="Available", now=at(9, month=4, day=30))
    svc.clock_in(agent.user_id, activity="Available", now=at(9, day=2))
    svc.clock_in(agent.user_id, activity="Available", now=at(9, day=1))
    svc.start_break(agent.user_id, break_type="Coffee Break", now=at(10, month=4, day=30))
    container.requests_repo.save_leave(_leave(agent.user_id, RequestStatus.APPROVED))
    container.requests_repo.save_leave(_leave(agent.user_id, RequestStatus.PENDING))

    view = svc.get_month(actor=session_of(agent), user_id=agent.user_id, year=2024, month=5)

    assert [r["date"] for r in view["attendance"]] == ["2024-05-01", "2024-05-02"]
    assert len(view["breaks"]) == 1
    assert [leave["status"] for leave in view["leaves"]] == ["approved"]

    as_admin = svc.get_month(actor=session_of(admin), user_id=agent.user_id, year=2024, month=5)
    assert as_admin == view


def test_month_view_of_someone_else_is_forbidden_for_agents(container, make_user, session_of):
    me = make_user()
    other = make_user()

    with pytest.raises(AuthorizationError):
        container.attendance_service.get_month(actor=session_of(me), user_id=other.user_id, year=2024, month=5)


def test_month_view_rejects_bad_month(container, make_user, session_of):
    me = make_user()

    with pytest.raises(ValidationError):
        container.attendance_service.get_month(actor=session_of(me), user_id=me.user_id, year=2024, month=13)
