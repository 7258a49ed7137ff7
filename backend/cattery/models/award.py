from cattery.extensions import db
from .base import BaseModel
from .publishable_mixin import PublishableMixin

AWARD_CATEGORIES = (
    "best_in_show",
    "championship",
    "cattery_recognition",
    "breeding_award",
    "other",
)


class Award(BaseModel, PublishableMixin):
    __tablename__ = "awards"

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    award_date = db.Column(db.BigInteger, nullable=False, index=True)  # epoch ms
    awarding_organization = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(50), nullable=False, index=True)
    certificate_image = db.Column(db.String(512), nullable=False)
    gallery_images = db.Column(db.JSON, nullable=False, default=list)
    # Opaque reference, not enforced
    associated_cat_id = db.Column(db.String(64), nullable=True, index=True)
    achievements = db.Column(db.Text, nullable=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
