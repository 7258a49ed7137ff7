# cattery/application/hero_videos.py
from typing import Any, Dict

from cattery.models.hero_video import HeroVideo
from cattery.domain.invariants.hero_video import clean_hero_video
from .collections.single_active import SingleActiveCollection


class HeroVideoCollection(SingleActiveCollection):
    """
    Background videos for the landing page hero. New uploads start
    inactive; newest upload first in every listing.
    """

    model = HeroVideo
    entity_type = "hero_video"
    label = "Hero video"

    def ordering(self):
        return (HeroVideo.uploaded_at.desc(), HeroVideo.id.asc())

    def clean(self, data, *, partial):
        return clean_hero_video(data, partial=partial)

    def prepare_new(self, item, fields, now):
        fields["is_active"] = False
        item.uploaded_at = now

    def update_settings(self, item_id: str, data: Any) -> HeroVideo:
        return self.update(item_id, data)

    def stats(self) -> Dict[str, Any]:
        videos = HeroVideo.query.all()
        count = len(videos)

        total_size = sum(v.file_size or 0 for v in videos)
        total_duration = sum(v.duration or 0 for v in videos)

        return {
            "total_videos": count,
            "active_videos": sum(1 for v in videos if v.is_active),
            "total_size_bytes": total_size,
            "total_duration_seconds": total_duration,
            "average_size_bytes": total_size / count if count else 0,
            "average_duration_seconds": total_duration / count if count else 0,
        }


hero_videos = HeroVideoCollection()
