# cattery/domain/invariants/fields.py
from typing import Any, Callable, Dict, Iterable, Mapping

from cattery.domain.exceptions import ValidationFailure

Rule = Callable[[str, Any], Any]


def text(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationFailure(f"{field} must be a non-empty string")
    return value.strip()


def optional_text(field: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationFailure(f"{field} must be a string")
    return value


def integer(field: str, value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationFailure(f"{field} must be an integer")
    return value


def non_negative_number(field: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ValidationFailure(f"{field} must be a non-negative number")
    return value


def boolean(field: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValidationFailure(f"{field} must be a boolean")
    return value


def string_list(field: str, value: Any) -> list:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationFailure(f"{field} must be a list of strings")
    return list(value)


def choice(*allowed: str) -> Rule:
    def rule(field: str, value: Any) -> str:
        if value not in allowed:
            raise ValidationFailure(
                f"{field} must be one of: {', '.join(allowed)}"
            )
        return value
    return rule


def clean_fields(
    data: Any,
    *,
    rules: Mapping[str, Rule],
    required: Iterable[str] = (),
    nullable: Iterable[str] = (),
    partial: bool = False,
) -> Dict[str, Any]:
    """
    Validate a request payload against per-field rules.

    - Keys not listed in rules are ignored
    - Omitted keys are left out of the result, so partial updates keep them
    - An explicit null is kept (clearing the field) only for nullable fields
    - On create (partial=False) every required field must be present
    """
    if not isinstance(data, dict):
        raise ValidationFailure("Payload must be a JSON object")

    required = set(required)
    nullable = set(nullable)
    cleaned: Dict[str, Any] = {}

    for field, rule in rules.items():
        if field not in data:
            if not partial and field in required:
                raise ValidationFailure(f"{field} is required")
            continue

        value = data[field]
        if value is None:
            if field not in nullable:
                raise ValidationFailure(f"{field} cannot be null")
            cleaned[field] = None
            continue

        cleaned[field] = rule(field, value)

    return cleaned
