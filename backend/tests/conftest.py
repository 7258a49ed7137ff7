import pytest

from cattery import create_app
from cattery.extensions import db


class FakeClock:
    """Controllable replacement for cattery.utils.clock.now_ms."""

    def __init__(self, start=1_000):
        self.now = start

    def __call__(self):
        return self.now

    def set(self, value):
        self.now = value

    def advance(self, delta=1):
        self.now += delta
        return self.now


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr("cattery.utils.clock.now_ms", fake)
    return fake


@pytest.fixture
def make_announcement(app):
    from cattery.application.announcements import announcements

    def make(title="Litter news", **overrides):
        data = {"title": title, "content": "Kittens are here"}
        data.update(overrides)
        return announcements.create(data)

    return make


@pytest.fixture
def make_award(app):
    from cattery.application.awards import awards

    def make(title="Best in show", **overrides):
        data = {
            "title": title,
            "description": "International show",
            "award_date": 1_700_000_000_000,
            "awarding_organization": "WCF",
            "category": "best_in_show",
            "certificate_image": "https://img.example/cert.jpg",
        }
        data.update(overrides)
        return awards.create(data)

    return make


@pytest.fixture
def make_gallery_item(app):
    from cattery.application.gallery import gallery

    def make(title="Trophy shelf", **overrides):
        data = {
            "title": title,
            "image_url": "https://img.example/photo.jpg",
            "category": "photo",
        }
        data.update(overrides)
        return gallery.create(data)

    return make


@pytest.fixture
def make_hero_image(app):
    from cattery.application.hero_images import hero_images

    def make(alt="Maine Coon", **overrides):
        data = {"src": "https://img.example/hero.jpg", "alt": alt}
        data.update(overrides)
        return hero_images.create(data)

    return make


@pytest.fixture
def make_hero_video(app):
    from cattery.application.hero_videos import hero_videos

    def make(alt="Kittens playing", **overrides):
        data = {"src": "https://cdn.example/hero.mp4", "alt": alt}
        data.update(overrides)
        return hero_videos.create(data)

    return make
