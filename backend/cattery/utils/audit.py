from flask import current_app
from cattery.extensions import db
from cattery.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    """
    Record a mutation in the audit trail.

    The row joins the caller's transaction, so it is only persisted
    when the mutation itself commits.
    """
    log = AuditLog()

    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id or "*"
    log.payload = payload or {}

    db.session.add(log)

    current_app.logger.info(
        "%s %s=%s %s", action, entity_type, log.entity_id, log.payload
    )
