from cattery.extensions import db
from cattery.utils import clock
from .base import BaseModel
from .publishable_mixin import ActivatableMixin


class HeroImage(BaseModel, ActivatableMixin):
    __tablename__ = "hero_images"

    __table_args__ = (
        db.Index("idx_hero_image_active_position", "is_active", "position"),
    )

    src = db.Column(db.String(512), nullable=False)
    alt = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=True)
    subtitle = db.Column(db.String(255), nullable=True)
    position = db.Column(db.Integer, nullable=False, default=0, index=True)
    uploaded_at = db.Column(db.BigInteger, nullable=False, default=clock.now_ms)
