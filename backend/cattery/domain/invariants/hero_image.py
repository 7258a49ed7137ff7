from .fields import boolean, clean_fields, integer, optional_text, text

HERO_IMAGE_RULES = {
    "src": text,
    "alt": text,
    "name": optional_text,
    "subtitle": optional_text,
    "is_active": boolean,
}

HERO_IMAGE_UPDATE_RULES = {**HERO_IMAGE_RULES, "position": integer}


def clean_hero_image(data, *, partial=False):
    cleaned = clean_fields(
        data,
        rules=HERO_IMAGE_UPDATE_RULES if partial else HERO_IMAGE_RULES,
        required=("src", "alt"),
        nullable=("name", "subtitle"),
        partial=partial,
    )

    if not partial:
        cleaned.setdefault("is_active", False)
    return cleaned
