# cattery/models/publishable_mixin.py
from cattery.extensions import db

UNPUBLISHED = 0


class PublishableMixin:
    is_published = db.Column(db.Boolean, nullable=False, default=False, index=True)
    # epoch ms of the latest draft -> published transition, UNPUBLISHED otherwise
    published_at = db.Column(db.BigInteger, nullable=False, default=UNPUBLISHED)


class ActivatableMixin:
    is_active = db.Column(db.Boolean, nullable=False, default=False, index=True)
