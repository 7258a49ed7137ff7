# cattery/application/collections/base.py
from typing import Any, Dict, List, Optional, Tuple

from cattery.extensions import db
from cattery.domain.exceptions import NotFound, ValidationFailure
from cattery.domain.invariants.fields import integer, text
from cattery.utils import clock
from cattery.utils.audit import log_action
from cattery.utils.order import apply_order_updates, next_order
from cattery.utils.transaction import transactional


class Collection:
    """
    CRUD over a single content model.

    Subclasses fix:
    - model / entity_type / label
    - ordering(): the one ordering every read path uses
    - clean(): payload validation for create and partial update
    - order_field: the manual ordering column, if the collection has one
    """

    model: Any = None
    entity_type: str = ""
    label: str = ""
    order_field: Optional[str] = None

    def ordering(self) -> Tuple[Any, ...]:
        raise NotImplementedError

    def clean(self, data: Any, *, partial: bool) -> Dict[str, Any]:
        raise NotImplementedError

    # ------------------------
    # Reads
    # ------------------------

    def list_all(self) -> List[Any]:
        return self.model.query.order_by(*self.ordering()).all()

    def get(self, item_id: str):
        item = db.session.get(self.model, item_id)
        if item is None:
            raise NotFound(f"{self.label} not found")
        return item

    # ------------------------
    # Writes
    # ------------------------

    def assign(self, item, fields: Dict[str, Any], now: int) -> None:
        for field, value in fields.items():
            setattr(item, field, value)

    def prepare_new(self, item, fields: Dict[str, Any], now: int) -> None:
        """Hook for collection-specific defaults on insert."""

    def create(self, data: Any):
        """
        Insert a new item appended after the current last one.

        Responsibilities:
        - validation before anything is written
        - next order value computed in the same transaction as the insert
        - audit logging
        """
        fields = self.clean(data, partial=False)
        now = clock.now_ms()

        with transactional():
            item = self.model()
            self.prepare_new(item, fields, now)
            self.assign(item, fields, now)

            if self.order_field and getattr(item, self.order_field) is None:
                setattr(item, self.order_field, next_order(self.model, self.order_field))

            item.touch(now)
            db.session.add(item)
            db.session.flush()

            log_action(
                action=f"{self.entity_type}.create",
                entity_type=self.entity_type,
                entity_id=item.id,
                payload={"fields": sorted(fields)},
            )

        return item

    def update(self, item_id: str, data: Any):
        """
        Partial update: only the fields present in data change.
        """
        item = self.get(item_id)

        fields = self.clean(data, partial=True)
        if not fields:
            raise ValidationFailure("No valid fields provided for update")

        now = clock.now_ms()

        with transactional():
            self.assign(item, fields, now)
            item.touch(now)

            log_action(
                action=f"{self.entity_type}.update",
                entity_type=self.entity_type,
                entity_id=item.id,
                payload={"fields": sorted(fields)},
            )

        return item

    def delete(self, item_id: str) -> None:
        """
        Hard delete. References held by other collections are left untouched.
        """
        with transactional():
            item = self.get(item_id)
            db.session.delete(item)

            log_action(
                action=f"{self.entity_type}.delete",
                entity_type=self.entity_type,
                entity_id=item_id,
            )

    def reorder(self, updates: Any) -> Dict[str, int]:
        """
        Apply a batch of order values in one transaction.

        Values are not required to form a permutation. An unknown id
        rejects the whole batch.
        """
        if not self.order_field:
            raise ValidationFailure(f"{self.label} items cannot be reordered")

        pairs = parse_order_updates(updates, order_field=self.order_field)
        now = clock.now_ms()

        with transactional():
            applied = apply_order_updates(
                self.model, pairs, order_field=self.order_field, now=now
            )

            log_action(
                action=f"{self.entity_type}.reorder",
                entity_type=self.entity_type,
                entity_id="*",
                payload={"count": len(pairs)},
            )

        return applied


def parse_order_updates(updates: Any, *, order_field: str) -> List[Tuple[str, int]]:
    """Validate a reorder payload: [{"id": ..., <order_field>: int}, ...]."""
    if not isinstance(updates, list):
        raise ValidationFailure("Reorder payload must be a list")

    pairs = []
    for entry in updates:
        if not isinstance(entry, dict):
            raise ValidationFailure("Each reorder entry must be an object")
        if order_field not in entry:
            raise ValidationFailure(f"{order_field} is required")
        pairs.append((
            text("id", entry.get("id")),
            integer(order_field, entry[order_field]),
        ))
    return pairs
