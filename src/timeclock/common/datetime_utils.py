from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Optional

from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch it; services also accept an explicit ``now``.
    """
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """Format as ``2024-05-01T09:00:00.000Z``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are treated as UTC."""
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def date_key(value: datetime) -> str:
    """Day bucket used in attendance keys (UTC calendar date)."""
    return to_iso(value)[:10]


def month_key(year: int, month: int) -> str:
    return f"{int(year):04d}-{int(month):02d}"


def hours_between(start: str, end: Optional[str], *, now: Optional[datetime] = None) -> float:
    """Hours from start to end, or to ``now`` while still open."""
    finish = parse_iso_datetime(end) if end else (now or now_utc())
    return (finish - parse_iso_datetime(start)).total_seconds() / 3600


def require_date(value: Optional[str], field_name: str) -> str:
    try:
        return parse_iso_date((value or "").strip()).isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def require_datetime(value: Optional[str], field_name: str) -> str:
    try:
        return to_iso(parse_iso_datetime(value or ""))
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO-8601 timestamp")


def require_hhmm(value: Optional[str], field_name: str) -> Optional[str]:
    v = (value or "").strip()
    if not v:
        return None
    if not _HHMM.match(v):
        raise ValidationError(f"{field_name} must be HH:MM")
    return v
