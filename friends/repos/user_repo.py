"""Repository helpers for user lookups."""

from typing import Iterable, Optional

from django.db.models import QuerySet

from friends.db_accessor import DB_Accessor
from friends.models.user import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def find_by_id(self, user_id) -> Optional[User]:
        """Return an active user by id, or None for unknown or malformed ids."""
        try:
            user_id = int(user_id)
        except (TypeError, ValueError):
            return None
        return self.get_or_none(id=user_id, is_active=True)

    def active_except(self, excluded_ids: Iterable[int]) -> QuerySet:
        """Active users whose ids are not in ``excluded_ids``."""
        return self.list(
            filters={"is_active": True},
            exclude={"id__in": list(excluded_ids)},
            order_by=["username"],
        )
