# cattery/application/collections/publishable.py
from typing import Any, Dict, List, Optional, Sequence, Tuple

from cattery.domain.exceptions import ValidationFailure
from cattery.domain.lifecycle.publication import apply_publication
from cattery.utils import clock
from cattery.utils.audit import log_action
from cattery.utils.transaction import transactional
from .base import Collection


class PublishableCollection(Collection):
    """
    Ordered collection with a draft/published flag.

    published_at follows the latest draft -> published transition and is
    reset when the item goes back to draft.
    """

    order_field = "sort_order"

    # None lets the caller choose (default draft); True/False forces the state
    initial_published: Optional[bool] = None

    # (key, label) pairs for category_counts(); empty when not categorised
    categories: Sequence[Tuple[str, str]] = ()
    all_label = "Всички"
    hide_empty_categories = False

    def prepare_new(self, item, fields: Dict[str, Any], now: int) -> None:
        if self.initial_published is not None:
            fields["is_published"] = self.initial_published
        elif fields.get("is_published") is None:
            fields["is_published"] = False

    def assign(self, item, fields: Dict[str, Any], now: int) -> None:
        fields = dict(fields)
        is_published = fields.pop("is_published", None)

        super().assign(item, fields, now)

        if is_published is not None:
            apply_publication(item, is_published, now)

    def list_published(self, *, limit: Optional[int] = None, **filters: Any) -> List[Any]:
        query = self.model.query.filter_by(is_published=True)

        active_filters = {k: v for k, v in filters.items() if v is not None}
        if active_filters:
            query = query.filter_by(**active_filters)

        query = query.order_by(*self.ordering())

        if limit is not None:
            if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
                raise ValidationFailure("limit must be a positive integer")
            query = query.limit(limit)

        return query.all()

    def toggle_publication(self, item_id: str) -> bool:
        """
        Flip the published flag and return the new state.
        """
        now = clock.now_ms()

        with transactional():
            item = self.get(item_id)
            is_published = not item.is_published

            apply_publication(item, is_published, now)
            item.touch(now)

            log_action(
                action=f"{self.entity_type}.{'publish' if is_published else 'unpublish'}",
                entity_type=self.entity_type,
                entity_id=item.id,
                payload={"published_at": item.published_at},
            )

        return is_published

    def category_counts(self) -> List[Dict[str, Any]]:
        published = self.model.query.filter_by(is_published=True).all()

        counts: Dict[str, int] = {}
        for item in published:
            counts[item.category] = counts.get(item.category, 0) + 1

        result = [{"key": "all", "label": self.all_label, "count": len(published)}]
        for key, label in self.categories:
            count = counts.get(key, 0)
            if count or not self.hide_empty_categories:
                result.append({"key": key, "label": label, "count": count})

        return result
