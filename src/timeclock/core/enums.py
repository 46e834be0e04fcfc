from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization and read-scoping."""

    AGENT = "agent"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


class RecordStatus(str, Enum):
    """Lifecycle of attendance and break records."""

    ACTIVE = "active"
    COMPLETED = "completed"


class RequestStatus(str, Enum):
    """Approval workflow state (time change / leave)."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TimeChangeType(str, Enum):
    LOGIN = "login"
    LOGOUT = "logout"
    BREAK_START = "break-start"
    BREAK_END = "break-end"


class PresenceStatus(str, Enum):
    """Derived live status shown on dashboards; never stored."""

    ON_BREAK = "on-break"
    LOGGED_IN = "logged-in"
    OFFLINE = "offline"


MANAGER_ROLES = frozenset({Role.ADMIN, Role.SUPERADMIN})
