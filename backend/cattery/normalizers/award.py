from .common import timestamps


def normalize_award(award, admin=False):
    data = {
        "id": award.id,
        "title": award.title,
        "description": award.description,
        "award_date": award.award_date,
        "awarding_organization": award.awarding_organization,
        "category": award.category,
        "certificate_image": award.certificate_image,
        "gallery_images": award.gallery_images or [],
        "associated_cat_id": award.associated_cat_id,
        "achievements": award.achievements,
        "is_published": award.is_published,
        "published_at": award.published_at,
        "sort_order": award.sort_order,
    }

    if admin:
        data.update(timestamps(award))

    return data
