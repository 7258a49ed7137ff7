from .common import timestamps


def normalize_gallery_item(item, admin=False):
    data = {
        "id": item.id,
        "title": item.title,
        "description": item.description,
        "image_url": item.image_url,
        "category": item.category,
        "date": item.date,
        "associated_cat_id": item.associated_cat_id,
        "tags": item.tags or [],
        "is_published": item.is_published,
        "published_at": item.published_at,
        "sort_order": item.sort_order,
        "uploaded_at": item.uploaded_at,
    }

    if admin:
        data.update(timestamps(item))

    return data
