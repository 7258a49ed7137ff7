# cattery/application/awards.py
from typing import List, Optional

from cattery.models.award import Award
from cattery.domain.exceptions import ValidationFailure
from cattery.domain.invariants.award import clean_award
from .collections.publishable import PublishableCollection

AWARD_CATEGORY_LABELS = (
    ("best_in_show", "Най-добър от изложбата"),
    ("championship", "Шампионат"),
    ("cattery_recognition", "Признание за развъдник"),
    ("breeding_award", "Награда за развъждане"),
    ("other", "Други"),
)


class AwardCollection(PublishableCollection):
    """
    Show results and recognitions, most recent award first.
    Always created as a draft.
    """

    model = Award
    entity_type = "award"
    label = "Award"
    initial_published = False
    categories = AWARD_CATEGORY_LABELS

    def ordering(self):
        return (
            Award.award_date.desc(),
            Award.sort_order.asc(),
            Award.id.asc(),
        )

    def clean(self, data, *, partial):
        # is_published is only honoured on update
        return clean_award(data, partial=partial)

    def list_published(
        self,
        *,
        limit: Optional[int] = None,
        category: Optional[str] = None,
        associated_cat_id: Optional[str] = None,
    ) -> List[Award]:
        if category == "all":
            category = None
        if category is not None and category not in dict(self.categories):
            raise ValidationFailure(f"Unknown award category: {category}")

        # limit=0 means no limit
        return super().list_published(
            limit=limit or None, category=category, associated_cat_id=associated_cat_id
        )

    def list_for_cat(self, cat_id: str) -> List[Award]:
        return self.list_published(associated_cat_id=cat_id)


awards = AwardCollection()
