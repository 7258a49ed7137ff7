from cattery.extensions import db
from .base import BaseModel
from .publishable_mixin import PublishableMixin


class Announcement(BaseModel, PublishableMixin):
    __tablename__ = "announcements"

    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)
    featured_image = db.Column(db.String(512), nullable=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0, index=True)
