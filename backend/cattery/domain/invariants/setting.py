from cattery.models.site_setting import SETTING_TYPES
from .fields import choice, clean_fields, optional_text, text

setting_type = choice(*SETTING_TYPES)

SETTING_RULES = {
    "key": text,
    "value": optional_text,
    "type": setting_type,
    "description": optional_text,
}


def clean_setting(data):
    return clean_fields(
        data,
        rules=SETTING_RULES,
        required=("key", "value", "type"),
        nullable=("description",),
    )
