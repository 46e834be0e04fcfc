from __future__ import annotations

from dataclasses import dataclass

from .attendance.repository import AttendanceRepository, BreakRepository
from .attendance.service import AttendanceService
from .auth.repository import SessionRepository
from .auth.service import AuthService
from .categories.repository import CategoryRepository
from .categories.service import CategoryService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .requests.repository import RequestRepository
from .requests.service import RequestService
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService
from .settings.repository import SettingsRepository
from .settings.service import SettingsService
from .store.memory_store import InMemoryKeyValueStore
from .store.mysql_store import MySQLKeyValueStore
from .store.repository import KeyValueStore
from .users.repository import UserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    users_repo: UserRepository
    sessions_repo: SessionRepository
    attendance_repo: AttendanceRepository
    breaks_repo: BreakRepository
    requests_repo: RequestRepository
    settings_repo: SettingsRepository
    schedules_repo: ScheduleRepository
    categories_repo: CategoryRepository

    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    request_service: RequestService
    settings_service: SettingsService
    schedule_service: ScheduleService
    category_service: CategoryService
    report_service: ReportService


def build_store(*, backend: str, db_config: dict) -> KeyValueStore:
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend != "mysql":
        raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")
    return MySQLKeyValueStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))


def build_container(
    *,
    store: KeyValueStore,
    session_ttl_hours: int = 0,
    single_active_break: bool = False,
) -> Container:
    users_repo = UserRepository(store)
    sessions_repo = SessionRepository(store)
    attendance_repo = AttendanceRepository(store)
    breaks_repo = BreakRepository(store)
    requests_repo = RequestRepository(store)
    settings_repo = SettingsRepository(store)
    schedules_repo = ScheduleRepository(store)
    categories_repo = CategoryRepository(store)

    auth_service = AuthService(users_repo, sessions_repo, session_ttl_hours=session_ttl_hours)
    user_service = UserService(users_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        breaks_repo,
        requests_repo,
        single_active_break=single_active_break,
    )
    request_service = RequestService(requests_repo, attendance_repo, users_repo, store)
    settings_service = SettingsService(settings_repo)
    schedule_service = ScheduleService(schedules_repo)
    category_service = CategoryService(categories_repo, users_repo)
    report_service = ReportService(users_repo, attendance_repo, breaks_repo)

    return Container(
        store=store,
        users_repo=users_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        breaks_repo=breaks_repo,
        requests_repo=requests_repo,
        settings_repo=settings_repo,
        schedules_repo=schedules_repo,
        categories_repo=categories_repo,
        auth_service=auth_service,
        user_service=user_service,
        attendance_service=attendance_service,
        request_service=request_service,
        settings_service=settings_service,
        schedule_service=schedule_service,
        category_service=category_service,
        report_service=report_service,
    )
