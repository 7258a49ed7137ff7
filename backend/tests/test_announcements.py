import pytest

from cattery.application.announcements import announcements
from cattery.domain.exceptions import NotFound, ValidationFailure
from cattery.models.announcement import Announcement
from cattery.models.audit_log import AuditLog


def test_create_appends_after_current_maximum(make_announcement):
    first = make_announcement("one")
    second = make_announcement("two")
    third = make_announcement("three")

    assert [first.sort_order, second.sort_order, third.sort_order] == [1, 2, 3]
    assert [a.title for a in announcements.list_all()] == ["one", "two", "three"]


def test_create_uses_max_not_count(make_announcement):
    make_announcement("low", sort_order=10)
    make_announcement("gap", sort_order=40)

    assert make_announcement("next").sort_order == 41


def test_create_as_draft_by_default(make_announcement, clock):
    announcement = make_announcement()

    assert announcement.is_published is False
    assert announcement.published_at == 0
    assert announcement.updated_at == clock.now


def test_create_already_published_stamps_creation_time(make_announcement, clock):
    clock.set(5_000)
    announcement = make_announcement(is_published=True)

    assert announcement.published_at == 5_000


def test_toggle_publication_scenario(make_announcement, clock):
    announcement = make_announcement()
    assert announcement.published_at == 0

    clock.set(100)
    assert announcements.toggle_publication(announcement.id) is True
    assert announcements.get(announcement.id).published_at == 100

    clock.set(200)
    assert announcements.toggle_publication(announcement.id) is False
    refreshed = announcements.get(announcement.id)
    assert refreshed.published_at == 0
    assert refreshed.updated_at == 200


def test_republishing_stamps_latest_transition(make_announcement, clock):
    announcement = make_announcement()

    clock.set(100)
    announcements.toggle_publication(announcement.id)
    clock.set(200)
    announcements.toggle_publication(announcement.id)
    clock.set(300)
    announcements.toggle_publication(announcement.id)

    assert announcements.get(announcement.id).published_at == 300


def test_update_keeps_published_at_while_staying_published(make_announcement, clock):
    clock.set(100)
    announcement = make_announcement(is_published=True)

    clock.set(900)
    announcements.update(announcement.id, {"is_published": True, "title": "Edited"})

    refreshed = announcements.get(announcement.id)
    assert refreshed.published_at == 100
    assert refreshed.updated_at == 900
    assert refreshed.title == "Edited"


def test_update_unpublish_resets_published_at(make_announcement, clock):
    announcement = make_announcement(is_published=True)

    announcements.update(announcement.id, {"is_published": False})

    assert announcements.get(announcement.id).published_at == 0


def test_update_only_touches_provided_fields(make_announcement):
    announcement = make_announcement(featured_image="https://img.example/a.jpg")

    announcements.update(announcement.id, {"title": "Renamed"})

    refreshed = announcements.get(announcement.id)
    assert refreshed.title == "Renamed"
    assert refreshed.content == "Kittens are here"
    assert refreshed.featured_image == "https://img.example/a.jpg"


def test_update_null_clears_optional_field(make_announcement):
    announcement = make_announcement(featured_image="https://img.example/a.jpg")

    announcements.update(announcement.id, {"featured_image": None})

    assert announcements.get(announcement.id).featured_image is None


def test_update_rejects_blank_title_without_changes(make_announcement):
    announcement = make_announcement("Original")

    with pytest.raises(ValidationFailure):
        announcements.update(announcement.id, {"title": "", "content": "New"})

    refreshed = announcements.get(announcement.id)
    assert refreshed.title == "Original"
    assert refreshed.content == "Kittens are here"


def test_update_without_known_fields_fails(make_announcement):
    announcement = make_announcement()

    with pytest.raises(ValidationFailure, match="No valid fields"):
        announcements.update(announcement.id, {"colour": "red"})


def test_create_validation_leaves_collection_unchanged(make_announcement):
    make_announcement()

    with pytest.raises(ValidationFailure):
        announcements.create({"title": "No content"})

    assert Announcement.query.count() == 1


@pytest.mark.parametrize(
    "operation",
    [
        lambda: announcements.update("missing", {"title": "x"}),
        lambda: announcements.toggle_publication("missing"),
        lambda: announcements.delete("missing"),
    ],
)
def test_unknown_id_fails_without_side_effects(make_announcement, operation):
    existing = make_announcement(is_published=True)
    before = (existing.title, existing.is_published, existing.published_at, existing.updated_at)

    with pytest.raises(NotFound):
        operation()

    after = announcements.get(existing.id)
    assert (after.title, after.is_published, after.published_at, after.updated_at) == before


def test_delete_twice(make_announcement):
    announcement = make_announcement()

    announcements.delete(announcement.id)
    with pytest.raises(NotFound):
        announcements.delete(announcement.id)


def test_published_list_uses_sort_order(make_announcement):
    a = make_announcement("a", is_published=True)
    make_announcement("draft")
    c = make_announcement("c", is_published=True)

    announcements.reorder([
        {"id": a.id, "sort_order": 9},
        {"id": c.id, "sort_order": 2},
    ])

    assert [x.title for x in announcements.list_published()] == ["c", "a"]


def test_latest_is_limited(make_announcement):
    for i in range(5):
        make_announcement(f"news {i}", is_published=True)

    assert [a.title for a in announcements.latest(2)] == ["news 0", "news 1"]


def test_latest_with_zero_limit_uses_default(make_announcement):
    for i in range(5):
        make_announcement(f"news {i}", is_published=True)

    assert len(announcements.latest(0)) == 3
    assert len(announcements.latest(None)) == 3


def test_reorder_tolerates_duplicates(make_announcement):
    a = make_announcement("a")
    b = make_announcement("b")

    announcements.reorder([
        {"id": a.id, "sort_order": 5},
        {"id": b.id, "sort_order": 5},
    ])

    assert {x.sort_order for x in announcements.list_all()} == {5}


def test_reorder_with_unknown_id_changes_nothing(make_announcement):
    a = make_announcement("a")

    with pytest.raises(NotFound):
        announcements.reorder([
            {"id": a.id, "sort_order": 7},
            {"id": "missing", "sort_order": 1},
        ])

    assert announcements.get(a.id).sort_order == 1


def test_reorder_payload_is_validated(make_announcement):
    a = make_announcement("a")

    with pytest.raises(ValidationFailure):
        announcements.reorder([{"id": a.id, "sort_order": "first"}])
    with pytest.raises(ValidationFailure):
        announcements.reorder({"id": a.id})


def test_mutations_are_audited(make_announcement):
    announcement = make_announcement()
    announcements.toggle_publication(announcement.id)

    actions = [log.action for log in AuditLog.query.filter_by(entity_id=announcement.id)]
    assert sorted(actions) == ["announcement.create", "announcement.publish"]
