from .fields import boolean, clean_fields, integer, optional_text, text

ANNOUNCEMENT_RULES = {
    "title": text,
    "content": text,
    "featured_image": optional_text,
    "is_published": boolean,
    "sort_order": integer,
}


def clean_announcement(data, *, partial=False):
    return clean_fields(
        data,
        rules=ANNOUNCEMENT_RULES,
        required=("title", "content"),
        nullable=("featured_image",),
        partial=partial,
    )
