from flask import request, jsonify
from cattery.models.audit_log import AuditLog
from cattery.normalizers.audit import normalize_audit_log
from cattery.normalizers.pagination import normalize_cursor_page
from cattery.utils.pagination import paginate_newest_first, parse_limit
from . import v1_bp


@v1_bp.route("/audit", methods=["GET"])
def list_audit_logs():
    query = AuditLog.query

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs, meta = paginate_newest_first(
        query,
        model=AuditLog,
        limit=parse_limit(request.args.get("limit")),
        cursor=request.args.get("cursor"),
    )

    return jsonify(normalize_cursor_page(logs, normalize_audit_log, meta)), 200
