# cattery/application/collections/single_active.py
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from cattery.extensions import db
from cattery.domain.exceptions import CapacityExceeded
from cattery.utils import clock
from cattery.utils.audit import log_action
from cattery.utils.transaction import transactional
from .base import Collection


class SingleActiveCollection(Collection):
    """
    Collection where at most one item is active.

    Activation deactivates every other item in the same transaction.
    The currently active rows are locked first, and a unique partial index
    on the model rejects a second active row, so two concurrent
    activations cannot both commit: the loser gets CapacityExceeded.
    """

    def get_active(self) -> Optional[Any]:
        return (
            self.model.query
            .filter_by(is_active=True)
            .order_by(*self.ordering())
            .first()
        )

    def _activate(self, item, now: int) -> None:
        others = (
            db.session.execute(
                select(self.model)
                .where(self.model.is_active.is_(True), self.model.id != item.id)
                .with_for_update()
            )
            .scalars()
            .all()
        )
        for other in others:
            other.is_active = False
            other.touch(now)

        # the unique index is checked per statement, deactivations go first
        db.session.flush()

        item.is_active = True
        item.touch(now)
        db.session.flush()

        log_action(
            action=f"{self.entity_type}.activate",
            entity_type=self.entity_type,
            entity_id=item.id,
            payload={"deactivated": [other.id for other in others]},
        )

    def _conflict(self) -> CapacityExceeded:
        return CapacityExceeded(
            f"Another {self.label.lower()} was activated at the same time"
        )

    def activate(self, item_id: str):
        now = clock.now_ms()

        try:
            with transactional():
                item = self.get(item_id)
                self._activate(item, now)
        except IntegrityError as exc:
            raise self._conflict() from exc

        return item

    def toggle_active(self, item_id: str) -> bool:
        """
        Inactive -> behaves like activate().
        Active -> deactivated, leaving no active item at all.
        """
        now = clock.now_ms()

        try:
            with transactional():
                item = self.get(item_id)

                if item.is_active:
                    item.is_active = False
                    item.touch(now)
                    log_action(
                        action=f"{self.entity_type}.deactivate",
                        entity_type=self.entity_type,
                        entity_id=item.id,
                    )
                else:
                    self._activate(item, now)

                is_active = item.is_active
        except IntegrityError as exc:
            raise self._conflict() from exc

        return is_active
