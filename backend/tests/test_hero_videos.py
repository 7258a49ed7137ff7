import pytest
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from cattery.application.hero_videos import hero_videos
from cattery.domain.exceptions import CapacityExceeded, NotFound, ValidationFailure
from cattery.extensions import db
from cattery.models.hero_video import HeroVideo
from cattery.normalizers.hero_video import normalize_hero_video


def active_ids():
    return [v.id for v in hero_videos.list_all() if v.is_active]


def test_new_videos_are_inactive_with_playback_defaults(make_hero_video):
    video = make_hero_video(is_active=True)

    assert video.is_active is False
    assert (video.should_autoplay, video.should_loop, video.should_mute) == (True, True, True)


def test_activate_switches_the_active_video(make_hero_video):
    x = make_hero_video("x")
    y = make_hero_video("y")

    hero_videos.activate(x.id)
    hero_videos.activate(y.id)

    assert active_ids() == [y.id]
    assert hero_videos.get_active().id == y.id


def test_at_most_one_active_after_every_call(make_hero_video):
    videos = [make_hero_video(f"v{i}") for i in range(4)]

    for video in videos + videos[::-1]:
        hero_videos.activate(video.id)
        assert active_ids() == [video.id]


def test_activate_already_active_keeps_it_active(make_hero_video):
    video = make_hero_video()

    hero_videos.activate(video.id)
    hero_videos.activate(video.id)

    assert active_ids() == [video.id]


def test_toggle_active_video_leaves_none_active(make_hero_video):
    video = make_hero_video()

    assert hero_videos.toggle_active(video.id) is True
    assert hero_videos.toggle_active(video.id) is False

    assert active_ids() == []
    assert hero_videos.get_active() is None


def test_toggle_inactive_video_behaves_like_activate(make_hero_video):
    x = make_hero_video("x")
    y = make_hero_video("y")
    hero_videos.activate(x.id)

    assert hero_videos.toggle_active(y.id) is True
    assert active_ids() == [y.id]


def test_unknown_video(app):
    with pytest.raises(NotFound):
        hero_videos.activate("missing")
    with pytest.raises(NotFound):
        hero_videos.toggle_active("missing")


def test_listing_is_newest_upload_first(make_hero_video, clock):
    clock.set(1_000)
    make_hero_video("older")
    clock.set(2_000)
    make_hero_video("newer")

    assert [v.alt for v in hero_videos.list_all()] == ["newer", "older"]


def test_update_settings(make_hero_video):
    video = make_hero_video()

    updated = hero_videos.update_settings(video.id, {"should_mute": False, "title": "Hero"})

    assert updated.should_mute is False
    assert updated.title == "Hero"
    assert updated.should_loop is True


def test_update_settings_requires_a_field(make_hero_video):
    video = make_hero_video()

    with pytest.raises(ValidationFailure):
        hero_videos.update_settings(video.id, {"src": "https://elsewhere/video.mp4"})


def test_stats(make_hero_video):
    assert hero_videos.stats()["average_size_bytes"] == 0

    a = make_hero_video(file_size=100, duration=10)
    make_hero_video(file_size=300)
    hero_videos.activate(a.id)

    stats = hero_videos.stats()
    assert stats["total_videos"] == 2
    assert stats["active_videos"] == 1
    assert stats["total_size_bytes"] == 400
    assert stats["average_size_bytes"] == 200
    assert stats["total_duration_seconds"] == 10
    assert stats["average_duration_seconds"] == 5


def test_storage_references_are_resolved(app, make_hero_video):
    app.config["MEDIA_BASE_URL"] = "https://media.example/"
    video = make_hero_video(src="storage://abc.mp4", thumbnail_src="https://img.example/t.jpg")

    data = normalize_hero_video(video)

    assert data["src"] == "https://media.example/abc.mp4"
    assert data["thumbnail_src"] == "https://img.example/t.jpg"


def test_database_rejects_a_second_active_video(make_hero_video):
    first, second = make_hero_video("first"), make_hero_video("second")
    hero_videos.activate(first.id)

    second.is_active = True
    with pytest.raises(IntegrityError):
        db.session.flush()
    db.session.rollback()

    assert active_ids() == [first.id]


def test_concurrent_activation_is_reported_as_conflict(make_hero_video, monkeypatch):
    first, second = make_hero_video("first"), make_hero_video("second")
    first_id = first.id
    activate_one = hero_videos._activate

    def activate_while_another_commits(item, now):
        activate_one(item, now)
        # a competing request activates the other video in the same window
        db.session.execute(
            update(HeroVideo)
            .where(HeroVideo.id == first_id)
            .values(is_active=True)
            .execution_options(synchronize_session=False)
        )

    monkeypatch.setattr(hero_videos, "_activate", activate_while_another_commits)

    with pytest.raises(CapacityExceeded):
        hero_videos.activate(second.id)

    assert hero_videos.get_active() is None
