# cattery/application/collections/bounded_active.py
from typing import Any, Dict, List

from flask import current_app
from sqlalchemy import select

from cattery.extensions import db
from cattery.domain.exceptions import CapacityExceeded, ValidationFailure
from cattery.utils import clock
from cattery.utils.audit import log_action
from cattery.utils.transaction import transactional
from .base import Collection

DEFAULT_ACTIVE_LIMIT = 6

MOVE_DIRECTIONS = {"up": -1, "down": 1}


class BoundedActiveCollection(Collection):
    """
    Ordered collection where at most `active_limit()` items are active.

    Activation past the ceiling is rejected with CapacityExceeded;
    deactivation is never blocked.

    The capacity check locks every row of the collection before counting,
    so concurrent activations of existing items are serialized on databases
    with row locks. Accepted risk: two concurrent creates with
    is_active=true can each miss the other's uncommitted insert and
    overshoot the ceiling by one. SQLite serializes writers, so it is
    unaffected.
    """

    order_field = "position"
    limit_config_key = ""

    def active_limit(self) -> int:
        return current_app.config.get(self.limit_config_key, DEFAULT_ACTIVE_LIMIT)

    def active_query(self):
        return self.model.query.filter_by(is_active=True)

    def list_active(self) -> List[Any]:
        return self.active_query().order_by(*self.ordering()).all()

    def count_active(self) -> int:
        return self.active_query().count()

    def ensure_capacity(self) -> None:
        limit = self.active_limit()
        rows = (
            db.session.execute(
                select(self.model)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            .scalars()
            .all()
        )
        if sum(1 for row in rows if row.is_active) >= limit:
            raise CapacityExceeded(
                f"Maximum of {limit} active {self.label.lower()}s allowed"
            )

    def assign(self, item, fields: Dict[str, Any], now: int) -> None:
        # Pending inserts are not counted yet, so check before assigning
        if fields.get("is_active") and not item.is_active:
            self.ensure_capacity()

        super().assign(item, fields, now)

    def toggle_active(self, item_id: str) -> bool:
        """
        Deactivate an active item, or activate an inactive one if the
        ceiling allows it. Returns the new state.
        """
        now = clock.now_ms()

        with transactional():
            item = self.get(item_id)

            if not item.is_active:
                self.ensure_capacity()

            item.is_active = not item.is_active
            item.touch(now)

            log_action(
                action=f"{self.entity_type}.{'activate' if item.is_active else 'deactivate'}",
                entity_type=self.entity_type,
                entity_id=item.id,
            )

            is_active = item.is_active

        return is_active

    def move(self, item_id: str, direction: str) -> bool:
        """
        Swap an active item's position with its neighbour among the
        active items. Items outside the active set, and moves past either
        end, are ignored. Returns whether anything moved.
        """
        if direction not in MOVE_DIRECTIONS:
            raise ValidationFailure("direction must be 'up' or 'down'")

        now = clock.now_ms()

        with transactional():
            item = self.get(item_id)
            active = self.list_active()

            ids = [i.id for i in active]
            if item.id not in ids:
                return False

            target_index = ids.index(item.id) + MOVE_DIRECTIONS[direction]
            if target_index < 0 or target_index >= len(active):
                return False

            target = active[target_index]
            item.position, target.position = target.position, item.position
            item.touch(now)
            target.touch(now)
            db.session.flush()

            log_action(
                action=f"{self.entity_type}.move",
                entity_type=self.entity_type,
                entity_id=item.id,
                payload={"direction": direction, "swapped_with": target.id},
            )

        return True
