from cattery.extensions import db
from cattery.utils import clock
from .base import BaseModel
from .publishable_mixin import PublishableMixin

GALLERY_CATEGORIES = ("award", "certificate", "photo", "trophy", "achievement")


class GalleryItem(BaseModel, PublishableMixin):
    __tablename__ = "gallery_items"

    __table_args__ = (
        db.Index("idx_gallery_published_category", "is_published", "category"),
    )

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.String(512), nullable=False)
    category = db.Column(db.String(50), nullable=False)
    date = db.Column(db.String(50), nullable=True)  # free-form display date
    associated_cat_id = db.Column(db.String(64), nullable=True)
    tags = db.Column(db.JSON, nullable=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0, index=True)
    uploaded_at = db.Column(db.BigInteger, nullable=False, default=clock.now_ms)
