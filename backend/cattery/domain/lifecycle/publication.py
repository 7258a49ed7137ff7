from cattery.models.publishable_mixin import UNPUBLISHED


def next_published_at(
    *,
    was_published: bool,
    is_published: bool,
    published_at: int,
    now: int,
) -> int:
    """
    Publication timestamp after a change of the published flag.

    - draft -> published: stamped with now
    - published -> published: kept as is
    - anything -> draft: reset to UNPUBLISHED
    """
    if not is_published:
        return UNPUBLISHED

    if was_published and published_at:
        return published_at

    return now


def apply_publication(item, is_published: bool, now: int) -> None:
    """Set the published flag on a publishable record and stamp published_at."""
    item.published_at = next_published_at(
        was_published=bool(item.is_published),
        is_published=is_published,
        published_at=item.published_at or UNPUBLISHED,
        now=now,
    )
    item.is_published = is_published
