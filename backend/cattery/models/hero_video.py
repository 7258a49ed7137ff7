from cattery.extensions import db
from cattery.utils import clock
from .base import BaseModel
from .publishable_mixin import ActivatableMixin


class HeroVideo(BaseModel, ActivatableMixin):
    __tablename__ = "hero_videos"

    # At most one active row. Partial indexes exist on PostgreSQL and SQLite
    # only; elsewhere the rule rests on the application-level activation.
    __table_args__ = (
        db.Index(
            "uq_hero_video_single_active",
            "is_active",
            unique=True,
            postgresql_where=db.text("is_active"),
            sqlite_where=db.text("is_active = 1"),
        ).ddl_if(dialect=("postgresql", "sqlite")),
    )

    src = db.Column(db.String(512), nullable=False)
    thumbnail_src = db.Column(db.String(512), nullable=True)
    alt = db.Column(db.String(255), nullable=False)
    title = db.Column(db.String(255), nullable=True)
    description = db.Column(db.Text, nullable=True)

    duration = db.Column(db.Float, nullable=True)  # seconds
    file_size = db.Column(db.BigInteger, nullable=True)  # bytes
    format = db.Column(db.String(50), nullable=True)

    should_autoplay = db.Column(db.Boolean, nullable=False, default=True)
    should_loop = db.Column(db.Boolean, nullable=False, default=True)
    should_mute = db.Column(db.Boolean, nullable=False, default=True)

    uploaded_at = db.Column(db.BigInteger, nullable=False, default=clock.now_ms, index=True)
