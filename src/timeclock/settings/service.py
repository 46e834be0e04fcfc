from __future__ import annotations

from typing import Any, Dict, List

from ..auth.model import Session
from ..common.validators import require_string_list
from ..core.exceptions import AuthenticationError
from .repository import SettingsRepository


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get_settings(self) -> Dict[str, List[str]]:
        return {
            "breakTypes": self._settings.get_break_types(),
            "activities": self._settings.get_activities(),
        }

    def set_break_types(self, *, actor: Session, break_types: Any) -> List[str]:
        if not actor.is_superadmin:
            raise AuthenticationError("Unauthorized")
        values = require_string_list(break_types, "Break types")
        self._settings.set_break_types(values)
        return values

    def set_activities(self, *, actor: Session, activities: Any) -> List[str]:
        if not actor.is_superadmin:
            raise AuthenticationError("Unauthorized")
        values = require_string_list(activities, "Activities")
        self._settings.set_activities(values)
        return values
