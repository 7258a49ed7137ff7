import pytest

from cattery.application.awards import awards
from cattery.domain.exceptions import ValidationFailure


def test_awards_start_as_drafts_even_if_asked_otherwise(make_award):
    award = make_award(is_published=True)

    assert award.is_published is False
    assert award.published_at == 0
    assert award.sort_order == 1
    assert award.gallery_images == []


def test_create_requires_all_show_details(app):
    with pytest.raises(ValidationFailure, match="award_date is required"):
        awards.create({
            "title": "Champion",
            "description": "x",
            "awarding_organization": "WCF",
            "category": "championship",
            "certificate_image": "c.jpg",
        })


def test_unknown_category_is_rejected(make_award):
    with pytest.raises(ValidationFailure):
        make_award(category="cutest")


def test_all_read_paths_order_by_award_date_then_sort_order(make_award):
    old = make_award("old", award_date=1_000)
    new_b = make_award("new b", award_date=5_000)
    new_a = make_award("new a", award_date=5_000)
    for award in (old, new_b, new_a):
        awards.toggle_publication(award.id)

    awards.reorder([
        {"id": new_a.id, "sort_order": 0},
    ])

    expected = ["new a", "new b", "old"]
    assert [a.title for a in awards.list_all()] == expected
    assert [a.title for a in awards.list_published()] == expected


def test_published_filters(make_award):
    show = make_award("show", category="best_in_show", associated_cat_id="cat-1")
    champ = make_award("champ", category="championship")
    make_award("draft", category="championship")
    awards.toggle_publication(show.id)
    awards.toggle_publication(champ.id)

    assert [a.title for a in awards.list_published(category="championship")] == ["champ"]
    assert len(awards.list_published(category="all")) == 2
    assert len(awards.list_published(limit=1)) == 1
    assert len(awards.list_published(limit=0)) == 2
    assert [a.title for a in awards.list_for_cat("cat-1")] == ["show"]


def test_list_published_rejects_unknown_category(app):
    with pytest.raises(ValidationFailure):
        awards.list_published(category="cutest")


def test_update_can_publish(make_award, clock):
    award = make_award()

    clock.set(4_242)
    updated = awards.update(award.id, {"is_published": True, "achievements": "CAC"})

    assert updated.is_published is True
    assert updated.published_at == 4_242
    assert updated.achievements == "CAC"


def test_update_gallery_images_null_means_empty(make_award):
    award = make_award(gallery_images=["a.jpg"])

    awards.update(award.id, {"gallery_images": None})

    assert awards.get(award.id).gallery_images == []


def test_category_counts_include_empty_categories(make_award):
    award = make_award(category="championship")
    make_award(category="other")
    awards.toggle_publication(award.id)

    counts = {c["key"]: c["count"] for c in awards.category_counts()}

    assert counts == {
        "all": 1,
        "best_in_show": 0,
        "championship": 1,
        "cattery_recognition": 0,
        "breeding_award": 0,
        "other": 0,
    }
