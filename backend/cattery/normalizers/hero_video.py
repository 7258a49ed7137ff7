from cattery.utils.media import resolve_media_url
from .common import timestamps


def normalize_hero_video(video, admin=False):
    """
    Storage references in src/thumbnail_src are resolved to public URLs.
    """
    data = {
        "id": video.id,
        "src": resolve_media_url(video.src),
        "thumbnail_src": resolve_media_url(video.thumbnail_src),
        "alt": video.alt,
        "title": video.title,
        "description": video.description,
        "is_active": video.is_active,
        "duration": video.duration,
        "file_size": video.file_size,
        "format": video.format,
        "should_autoplay": video.should_autoplay,
        "should_loop": video.should_loop,
        "should_mute": video.should_mute,
        "uploaded_at": video.uploaded_at,
    }

    if admin:
        data.update(timestamps(video))

    return data
