# cattery/normalizers/pagination.py
from typing import Any, Callable, Dict, List

from cattery.utils.pagination import CursorMeta


def normalize_cursor_page(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    meta: CursorMeta,
) -> Dict[str, Any]:
    return {
        "data": [normalize_fn(item) for item in items],
        "meta": {
            "has_more": meta["has_more"],
            "next_cursor": meta["next_cursor"],
        },
    }
