from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..auth.model import Session
from ..common.datetime_utils import now_utc, to_iso
from ..common.ids import generate_id
from ..common.validators import require_non_empty, require_string_list
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ConflictError, NotFoundError
from ..users.repository import UserRepository
from .model import Category
from .repository import CategoryRepository


class CategoryService:
    """Owner-scoped expense categories.

    Agents see the super admin's categories plus their admin's; admins see the super
    admin's plus their own; the super admin sees everything.
    """

    def __init__(self, categories: CategoryRepository, users: UserRepository):
        self._categories = categories
        self._users = users

    def list(self, *, actor: Session) -> List[Dict[str, Any]]:
        categories = self._categories.list_all()
        if actor.role != Role.SUPERADMIN:
            visible = {u.user_id for u in self._users.list_by_role(Role.SUPERADMIN)}
            if actor.role == Role.ADMIN:
                visible.add(actor.user_id)
            else:
                user = self._users.get_by_id(actor.user_id)
                if user and user.assigned_to:
                    visible.add(user.assigned_to)
            categories = [c for c in categories if c.owner in visible]
        return [c.to_dict() for c in categories]

    def create(
        self,
        *,
        actor: Session,
        name: str,
        subcategories: Any = None,
        now: Optional[datetime] = None,
    ) -> Category:
        if not actor.is_manager:
            raise AuthenticationError("Unauthorized - Only admins can create categories")

        name = require_non_empty(name, "Name")
        for c in self._categories.list_all():
            if c.name == name and c.owner == actor.user_id:
                raise ConflictError("Category already exists")

        category = Category(
            category_id=generate_id(),
            name=name,
            owner=actor.user_id,
            created_at=to_iso(now or now_utc()),
            subcategories=require_string_list(subcategories or [], "Subcategories"),
        )
        self._categories.save(category)
        return category

    def _owned(self, actor: Session, category_id: str, action: str) -> Category:
        category = self._categories.get(category_id)
        if not category:
            raise NotFoundError("Category not found")
        if category.owner != actor.user_id:
            raise AuthorizationError(f"Only the owner can {action} this category")
        return category

    def update(self, *, actor: Session, category_id: str, name: Any = None, subcategories: Any = None) -> Category:
        category = self._owned(actor, category_id, "update")

        if name:
            category = replace(category, name=require_non_empty(name, "Name"))
        if subcategories:
            category = replace(category, subcategories=require_string_list(subcategories, "Subcategories"))
        self._categories.save(category)
        return category

    def delete(self, *, actor: Session, category_id: str) -> None:
        self._owned(actor, category_id, "delete")
        self._categories.delete(category_id)
