from cattery.models.award import AWARD_CATEGORIES
from .fields import (
    boolean,
    choice,
    clean_fields,
    integer,
    optional_text,
    string_list,
    text,
)

AWARD_RULES = {
    "title": text,
    "description": text,
    "award_date": integer,
    "awarding_organization": text,
    "category": choice(*AWARD_CATEGORIES),
    "certificate_image": text,
    "gallery_images": string_list,
    "associated_cat_id": optional_text,
    "achievements": optional_text,
}

# Awards are always created as drafts; publishing happens on update/toggle
AWARD_UPDATE_RULES = {**AWARD_RULES, "is_published": boolean}

REQUIRED = (
    "title",
    "description",
    "award_date",
    "awarding_organization",
    "category",
    "certificate_image",
)

NULLABLE = ("gallery_images", "associated_cat_id", "achievements")


def clean_award(data, *, partial=False):
    cleaned = clean_fields(
        data,
        rules=AWARD_UPDATE_RULES if partial else AWARD_RULES,
        required=REQUIRED,
        nullable=NULLABLE,
        partial=partial,
    )

    if "gallery_images" in cleaned and cleaned["gallery_images"] is None:
        cleaned["gallery_images"] = []
    elif not partial:
        cleaned.setdefault("gallery_images", [])
    return cleaned
