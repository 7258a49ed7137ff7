# cattery/application/hero_images.py
from cattery.models.hero_image import HeroImage
from cattery.domain.invariants.hero_image import clean_hero_image
from .collections.bounded_active import BoundedActiveCollection


class HeroImageCollection(BoundedActiveCollection):
    model = HeroImage
    entity_type = "hero_image"
    label = "Hero image"
    limit_config_key = "HERO_IMAGE_ACTIVE_LIMIT"

    def ordering(self):
        return (
            HeroImage.position.asc(),
            HeroImage.created_at.asc(),
            HeroImage.id.asc(),
        )

    def clean(self, data, *, partial):
        return clean_hero_image(data, partial=partial)

    def prepare_new(self, item, fields, now):
        item.uploaded_at = now


hero_images = HeroImageCollection()
