from datetime import datetime, timezone
from flask import request, abort
from dateutil.parser import parse


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def enforce_optimistic_lock(updated_at_ms):
    """
    Enforces optimistic locking using the If-Unmodified-Since header.

    updated_at_ms is the record's last modification in epoch milliseconds.
    Aborts with 409 Conflict if the record changed after the client's copy.
    """
    client_ts = request.headers.get("If-Unmodified-Since")
    if not client_ts:
        return  # No optimistic lock requested

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ValueError, OverflowError):
        abort(400, description="Invalid If-Unmodified-Since header")

    # HTTP dates carry whole seconds only
    server_ts = datetime.fromtimestamp(updated_at_ms // 1000, tz=timezone.utc)

    if server_ts > client_ts:
        abort(
            409,
            description="Conflict detected. Resource has been modified."
        )
