from .common import timestamps


def normalize_announcement(announcement, admin=False):
    data = {
        "id": announcement.id,
        "title": announcement.title,
        "content": announcement.content,
        "featured_image": announcement.featured_image,
        "is_published": announcement.is_published,
        "published_at": announcement.published_at,
        "sort_order": announcement.sort_order,
    }

    if admin:
        data.update(timestamps(announcement))

    return data
