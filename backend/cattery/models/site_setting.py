from cattery.extensions import db
from .base import BaseModel

SETTING_TYPES = (
    "social_media",
    "contact_info",
    "site_content",
    "feature_toggle",
    "analytics",
    "seo",
    "location",
)


class SiteSetting(BaseModel):
    __tablename__ = "site_settings"

    key = db.Column(db.String(100), nullable=False, unique=True, index=True)
    value = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(50), nullable=False, index=True)
    description = db.Column(db.String(255), nullable=True)
