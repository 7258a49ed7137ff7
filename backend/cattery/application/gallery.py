# cattery/application/gallery.py
from typing import List, Optional

from cattery.models.gallery_item import GalleryItem
from cattery.domain.exceptions import ValidationFailure
from cattery.domain.invariants.gallery import clean_gallery_item
from .collections.publishable import PublishableCollection

GALLERY_CATEGORY_LABELS = (
    ("award", "Награди"),
    ("certificate", "Сертификати"),
    ("photo", "Снимки"),
    ("trophy", "Трофеи"),
    ("achievement", "Постижения"),
)


class GalleryCollection(PublishableCollection):
    """Business gallery. New items go live immediately."""

    model = GalleryItem
    entity_type = "gallery_item"
    label = "Gallery item"
    initial_published = True
    categories = GALLERY_CATEGORY_LABELS
    hide_empty_categories = True

    def ordering(self):
        return (
            GalleryItem.sort_order.asc(),
            GalleryItem.created_at.asc(),
            GalleryItem.id.asc(),
        )

    def clean(self, data, *, partial):
        return clean_gallery_item(data, partial=partial)

    def prepare_new(self, item, fields, now):
        super().prepare_new(item, fields, now)
        item.uploaded_at = now

    def list_published(self, *, category: Optional[str] = None) -> List[GalleryItem]:
        if category is not None and category not in dict(self.categories):
            raise ValidationFailure(f"Unknown gallery category: {category}")

        return super().list_published(category=category)


gallery = GalleryCollection()
