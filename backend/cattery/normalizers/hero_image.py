from .common import timestamps


def normalize_hero_image(image, admin=False):
    data = {
        "id": image.id,
        "src": image.src,
        "alt": image.alt,
        "name": image.name,
        "subtitle": image.subtitle,
        "is_active": image.is_active,
        "position": image.position,
        "uploaded_at": image.uploaded_at,
    }

    if admin:
        data.update(timestamps(image))

    return data
