from typing import Any, Mapping, Optional, Sequence, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor wrapping the basic manager operations of one model."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        exclude: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
    ) -> QuerySet:
        """Return a filtered, ordered and optionally truncated queryset."""
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        if exclude:
            qs = qs.exclude(**exclude)
        if order_by:
            qs = qs.order_by(*order_by)
        if limit is not None:
            qs = qs[: max(0, int(limit))]
        return qs

    def get(self, **lookup: Any) -> Model:
        """Fetch a single object matching the lookup."""
        return self.model.objects.get(**lookup)

    def get_or_none(self, **lookup: Any) -> Optional[Model]:
        """Fetch a single object, or None when nothing matches."""
        try:
            return self.get(**lookup)
        except self.model.DoesNotExist:
            return None

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
