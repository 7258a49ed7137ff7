# cattery/application/announcements.py
from typing import List, Optional

from cattery.models.announcement import Announcement
from cattery.domain.invariants.announcement import clean_announcement
from .collections.publishable import PublishableCollection

DEFAULT_LATEST_LIMIT = 3


class AnnouncementCollection(PublishableCollection):
    """
    News posts, shown in manual order.

    The publish state is chosen by the caller on create (draft when
    omitted) and an explicit sort_order may be supplied.
    """

    model = Announcement
    entity_type = "announcement"
    label = "Announcement"

    def ordering(self):
        return (
            Announcement.sort_order.asc(),
            Announcement.created_at.asc(),
            Announcement.id.asc(),
        )

    def clean(self, data, *, partial):
        return clean_announcement(data, partial=partial)

    def latest(self, limit: Optional[int] = DEFAULT_LATEST_LIMIT) -> List[Announcement]:
        # 0 or missing falls back to the default
        return self.list_published(limit=limit or DEFAULT_LATEST_LIMIT)


announcements = AnnouncementCollection()
