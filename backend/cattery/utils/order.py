from typing import Dict, Iterable, Tuple
from cattery.extensions import db
from cattery.domain.exceptions import NotFound


def next_order(model, order_field="sort_order"):
    """
    Next append position for a collection: max(existing) + 1, or 1 when empty.
    """
    column = getattr(model, order_field)
    current = db.session.query(db.func.max(column)).scalar()
    return 1 if current is None else current + 1


def apply_order_updates(
    model,
    updates: Iterable[Tuple[str, int]],
    *,
    order_field="sort_order",
    now: int,
) -> Dict[str, int]:
    """
    Assign new order values to the given records.

    Values are stored as given: gaps and duplicates are allowed and
    readers break ties themselves. Every id must exist, otherwise
    NotFound is raised before anything is written.
    """
    updates = list(updates)
    ids = {item_id for item_id, _ in updates}

    items = {
        item.id: item
        for item in model.query.filter(model.id.in_(ids)).all()
    }

    missing = sorted(ids - set(items))
    if missing:
        raise NotFound(f"{model.__name__} not found: {', '.join(missing)}")

    applied: Dict[str, int] = {}
    for item_id, value in updates:
        item = items[item_id]
        setattr(item, order_field, value)
        item.touch(now)
        applied[item_id] = value

    db.session.flush()
    return applied
