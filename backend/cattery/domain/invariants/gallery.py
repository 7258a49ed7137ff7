from cattery.models.gallery_item import GALLERY_CATEGORIES
from .fields import boolean, choice, clean_fields, optional_text, string_list, text

GALLERY_RULES = {
    "title": text,
    "description": optional_text,
    "image_url": text,
    "category": choice(*GALLERY_CATEGORIES),
    "date": optional_text,
    "associated_cat_id": optional_text,
    "tags": string_list,
}

GALLERY_UPDATE_RULES = {**GALLERY_RULES, "is_published": boolean}


def clean_gallery_item(data, *, partial=False):
    return clean_fields(
        data,
        rules=GALLERY_UPDATE_RULES if partial else GALLERY_RULES,
        required=("title", "image_url", "category"),
        nullable=("description", "date", "associated_cat_id", "tags"),
        partial=partial,
    )
