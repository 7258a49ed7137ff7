from .fields import boolean, clean_fields, non_negative_number, optional_text, text

PLAYBACK_FLAGS = ("should_autoplay", "should_loop", "should_mute")

HERO_VIDEO_SETTINGS_RULES = {
    "alt": text,
    "title": optional_text,
    "description": optional_text,
    "should_autoplay": boolean,
    "should_loop": boolean,
    "should_mute": boolean,
}

HERO_VIDEO_RULES = {
    **HERO_VIDEO_SETTINGS_RULES,
    "src": text,
    "thumbnail_src": optional_text,
    "duration": non_negative_number,
    "file_size": non_negative_number,
    "format": optional_text,
}

NULLABLE = ("title", "description", "thumbnail_src", "duration", "file_size", "format")


def clean_hero_video(data, *, partial=False):
    if partial:
        # only the playback/display settings are editable after upload
        return clean_fields(
            data,
            rules=HERO_VIDEO_SETTINGS_RULES,
            nullable=("title", "description"),
            partial=True,
        )

    cleaned = clean_fields(
        data, rules=HERO_VIDEO_RULES, required=("src", "alt"), nullable=NULLABLE
    )
    for flag in PLAYBACK_FLAGS:
        cleaned.setdefault(flag, True)
    return cleaned
