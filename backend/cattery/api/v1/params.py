from flask import request
from cattery.domain.exceptions import ValidationFailure


def json_body(default=None):
    data = request.get_json(silent=True)
    return default if data is None else data


def int_arg(name, default=None):
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationFailure(f"{name} must be an integer") from exc
