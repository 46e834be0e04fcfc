from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta
from typing import List, Optional

from werkzeug.security import generate_password_hash

from ..attendance.model import AttendanceRecord, BreakRecord
from ..attendance.repository import AttendanceRepository, BreakRepository
from ..common.datetime_utils import date_key, now_utc, to_iso
from ..common.ids import generate_id
from ..core.constants import DEFAULT_ACTIVITIES, DEFAULT_BREAK_TYPES, SUPERADMIN_EMAIL, SUPERADMIN_PASSWORD
from ..core.enums import RecordStatus, RequestStatus, Role, TimeChangeType
from ..requests.model import LeaveRequest, TimeChangeRequest
from ..requests.repository import RequestRepository
from ..settings.repository import SettingsRepository
from ..store.repository import KeyValueStore
from ..users.model import User
from ..users.repository import UserRepository

logger = logging.getLogger(__name__)

DEMO_ADMINS = (
    ("admin1@example.com", "John Admin", "Sales"),
    ("admin2@example.com", "Sarah Admin", "Support"),
    ("admin3@example.com", "Michael Chen", "Technical"),
    ("admin4@example.com", "Emma Wilson", "Sales"),
)

# (email, name, index into DEMO_ADMINS)
DEMO_AGENTS = (
    ("alice@example.com", "Alice Johnson", 0),
    ("bob@example.com", "Bob Smith", 0),
    ("carol@example.com", "Carol Davis", 3),
    ("david@example.com", "David Miller", 3),
    ("charlie@example.com", "Charlie Brown", 1),
    ("diana@example.com", "Diana Ross", 1),
    ("eve@example.com", "Eve Williams", 1),
    ("frank@example.com", "Frank Garcia", 1),
    ("grace@example.com", "Grace Lee", 2),
    ("henry@example.com", "Henry Martinez", 2),
    ("ivy@example.com", "Ivy Anderson", 2),
    ("jack@example.com", "Jack Taylor", 2),
    ("kelly@example.com", "Kelly White", 2),
    ("liam@example.com", "Liam Harris", 2),
    ("mia@example.com", "Mia Clark", 2),
)

DEMO_DEVICES = (
    ("Windows PC", "Desktop", "Windows 11"),
    ("MacBook Pro", "Laptop", "macOS"),
    ("iPhone 14", "Mobile", "iOS 17"),
    ("Samsung Galaxy", "Mobile", "Android 14"),
    ("iPad Pro", "Tablet", "iPadOS 17"),
    ("Dell Laptop", "Laptop", "Windows 11"),
    ("ThinkPad", "Laptop", "Windows 10"),
    ("iMac", "Desktop", "macOS"),
)

DEMO_HISTORY_DAYS = 60
DEMO_ATTENDANCE_RATE = 0.85


def ensure_seed_data(
    store: KeyValueStore,
    *,
    demo: bool = False,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> bool:
    """Seed an empty store: super admin and default vocabularies, optionally demo data.

    Returns False (and writes nothing) if any user already exists.
    """
    users = UserRepository(store)
    if not users.is_empty():
        return False

    now = now or now_utc()
    superadmin = User(
        user_id=generate_id(),
        email=SUPERADMIN_EMAIL,
        password_hash=generate_password_hash(SUPERADMIN_PASSWORD),
        role=Role.SUPERADMIN,
        name="Super Admin",
    )
    users.save(superadmin)
    logger.info("Super admin created with email: %s", SUPERADMIN_EMAIL)

    settings = SettingsRepository(store)
    settings.set_break_types(DEFAULT_BREAK_TYPES)
    settings.set_activities(DEFAULT_ACTIVITIES)

    if demo:
        _create_demo_data(store, now=now, rng=rng or random.Random())
    return True


def _create_demo_data(store: KeyValueStore, *, now: datetime, rng: random.Random) -> None:
    users = UserRepository(store)
    attendance = AttendanceRepository(store)
    breaks = BreakRepository(store)
    requests = RequestRepository(store)

    # Hash once; every demo account shares the same password.
    password_hash = generate_password_hash(SUPERADMIN_PASSWORD)

    admins: List[User] = []
    for email, name, team in DEMO_ADMINS:
        admin = User(user_id=generate_id(), email=email, password_hash=password_hash, role=Role.ADMIN, name=name, team=team)
        users.save(admin)
        admins.append(admin)

    agents: List[User] = []
    for email, name, admin_index in DEMO_AGENTS:
        owner = admins[admin_index]
        agent = User(
            user_id=generate_id(),
            email=email,
            password_hash=password_hash,
            role=Role.AGENT,
            name=name,
            team=owner.team,
            assigned_to=owner.user_id,
        )
        users.save(agent)
        agents.append(agent)

    activities = DEFAULT_ACTIVITIES[:5]
    for offset in range(DEMO_HISTORY_DAYS):
        day = now - timedelta(days=offset)
        if day.weekday() >= 5:
            continue
        midnight = day.replace(hour=0, minute=0, second=0, microsecond=0)

        for agent in agents:
            if rng.random() > DEMO_ATTENDANCE_RATE:
                continue

            device = rng.choice(DEMO_DEVICES)
            activity = rng.choice(activities)
            login = midnight + timedelta(hours=8 + rng.randrange(2), minutes=rng.randrange(60))
            logout = midnight + timedelta(hours=17 + rng.randrange(2), minutes=rng.randrange(60))
            attendance.save(
                AttendanceRecord(
                    attendance_id=generate_id(),
                    user_id=agent.user_id,
                    date=date_key(day),
                    login_time=to_iso(login),
                    logout_time=to_iso(logout),
                    activity=activity,
                    status=RecordStatus.COMPLETED,
                    device_name=device[0],
                    device_type=device[1],
                    device_os=device[2],
                    ip_address=f"192.168.{rng.randrange(255)}.{rng.randrange(255)}",
                )
            )

            for _ in range(2 + rng.randrange(3)):
                start = midnight + timedelta(hours=10 + rng.randrange(6), minutes=rng.randrange(60))
                breaks.save(
                    BreakRecord(
                        break_id=generate_id(),
                        user_id=agent.user_id,
                        break_type=rng.choice(DEFAULT_BREAK_TYPES),
                        activity=activity,
                        start_time=to_iso(start),
                        end_time=to_iso(start + timedelta(minutes=15 + rng.randrange(45))),
                        status=RecordStatus.COMPLETED,
                        resume_activity=activity,
                    )
                )

    created = to_iso(now)
    for agent, days_ahead, length, reason in (
        (agents[0], 7, 2, "Family vacation"),
        (agents[4], 14, 1, "Medical appointment"),
    ):
        start = now + timedelta(days=days_ahead)
        requests.save_leave(
            LeaveRequest(
                request_id=generate_id(),
                user_id=agent.user_id,
                user_name=agent.name,
                start_date=date_key(start),
                end_date=date_key(start + timedelta(days=length)),
                reason=reason,
                status=RequestStatus.PENDING,
                assigned_to=agent.assigned_to,
                created_at=created,
            )
        )

    yesterday = (now - timedelta(days=1)).replace(second=0, microsecond=0)
    bob = agents[1]
    requests.save_time_change(
        TimeChangeRequest(
            request_id=generate_id(),
            user_id=bob.user_id,
            user_name=bob.name,
            type=TimeChangeType.LOGIN,
            date=date_key(yesterday),
            original_time=to_iso(yesterday.replace(hour=9, minute=15)),
            requested_time=to_iso(yesterday.replace(hour=9, minute=0)),
            reason="Traffic delay, arrived late but need to log correct time",
            status=RequestStatus.PENDING,
            assigned_to=bob.assigned_to,
            created_at=created,
        )
    )
    logger.info("Demo data created: %d admins, %d agents", len(admins), len(agents))
