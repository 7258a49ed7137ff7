from datetime import datetime, timezone
import uuid
from cattery.extensions import db
from cattery.utils import clock


def utc_now():
    return datetime.now(timezone.utc)


class BaseModel(db.Model):
    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now, index=True)
    # epoch milliseconds, refreshed explicitly by every mutation
    updated_at = db.Column(db.BigInteger, nullable=False, default=clock.now_ms)

    def __init__(self, **kwargs):
        """
        Dummy __init__ to satisfy static type checkers (Pylance, MyPy).
        SQLAlchemy ORM will populate fields dynamically.
        """
        super().__init__(**kwargs)

    def touch(self, now: int) -> None:
        self.updated_at = now
