"""Example: drive the service layer directly (no Flask).

Controllers stay thin; every rule lives in the services, so the same calls work from a script.
"""

from datetime import datetime, timezone

from timeclock.container import build_container
from timeclock.core.constants import SUPERADMIN_EMAIL, SUPERADMIN_PASSWORD
from timeclock.database.seed import ensure_seed_data
from timeclock.store.memory_store import InMemoryKeyValueStore


def main():
    store = InMemoryKeyValueStore()
    ensure_seed_data(store)
    container = build_container(store=store)

    grant = container.auth_service.login(email=SUPERADMIN_EMAIL, password=SUPERADMIN_PASSWORD)
    boss = container.auth_service.verify_session(grant.session_id)

    agent = container.user_service.create_user(
        actor=boss,
        email="alice@example.com",
        password="secret1",
        name="Alice",
        role="agent",
        team="Support",
    )

    day = datetime(2024, 5, 1, tzinfo=timezone.utc)
    svc = container.attendance_service
    svc.clock_in(agent.user_id, activity="Chat Support", now=day.replace(hour=9))
    brk = svc.start_break(agent.user_id, break_type="Coffee Break", now=day.replace(hour=10))
    svc.end_break(agent.user_id, break_id=brk.break_id, activity="Chat Support", now=day.replace(hour=10, minute=15))
    svc.clock_out(agent.user_id, now=day.replace(hour=17))

    print(svc.get_month(actor=boss, user_id=agent.user_id, year=2024, month=5))
    print(container.report_service.live_status(actor=boss, now=day.replace(hour=18)))


if __name__ == "__main__":
    main()
