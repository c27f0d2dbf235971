import io
import sys

import pytest
from PIL import Image

from redwall.controller import Controller, default_cache_dir
from redwall.reddit import DownloadError
from redwall.screen import Screen
from redwall.types import Post


def _png(size=(90, 60), color=(200, 40, 40)):
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


class FakeClient:
    def __init__(self, posts, payloads):
        self.posts = posts
        self.payloads = payloads

    def fetch_posts(self):
        return list(self.posts)

    def download_image(self, url):
        payload = self.payloads[url]
        if isinstance(payload, Exception):
            raise payload
        return payload


class FakeSetter:
    def __init__(self, current="/home/user/old.jpg"):
        self._current = current
        self.calls = []

    def current(self):
        return self._current

    def set(self, image_path):
        self.calls.append(image_path)


POSTS = [
    Post(id="a", title="Lake", url="https://i.example.com/lake.png", post_hint="image"),
    Post(id="b", title="Broken", url="https://i.example.com/broken.png", post_hint="image"),
]


@pytest.fixture
def controller(tmp_path):
    payloads = {
        POSTS[0].url: _png(),
        POSTS[1].url: DownloadError("unexpected status 404"),
    }
    return Controller(
        FakeClient(POSTS, payloads), FakeSetter(), Screen(32, 24), tmp_path / "cache"
    )


def test_init_creates_cache_dir(tmp_path):
    target = tmp_path / "nested" / "cache"
    Controller(FakeClient([], {}), FakeSetter(), Screen(10, 10), target)
    assert target.is_dir()


def test_save_previous_and_undo(controller):
    controller.save_previous()
    assert controller.previous == "/home/user/old.jpg"
    controller.undo()
    assert controller.setter.calls == ["/home/user/old.jpg"]


def test_load_posts(controller):
    controller.load_posts()
    assert [post.title for post in controller.posts] == ["Lake", "Broken"]


def test_download_images_raises_but_keeps_successes(controller):
    controller.load_posts()
    with pytest.raises(DownloadError, match="404"):
        controller.download_images()
    assert controller.images[0] == _png()
    assert controller.images[1] is None
    assert controller.decoded[0].size == (90, 60)
    assert controller.decoded[1] is None


def test_download_images_reports_first_error_by_index(tmp_path):
    payloads = {
        POSTS[0].url: DownloadError("first"),
        POSTS[1].url: DownloadError("second"),
    }
    ctrl = Controller(FakeClient(POSTS, payloads), FakeSetter(), Screen(8, 8), tmp_path)
    ctrl.load_posts()
    with pytest.raises(DownloadError, match="first"):
        ctrl.download_images()


def test_download_images_undecodable_keeps_bytes(tmp_path):
    payloads = {POSTS[0].url: b"not an image"}
    ctrl = Controller(FakeClient(POSTS[:1], payloads), FakeSetter(), Screen(8, 8), tmp_path)
    ctrl.load_posts()
    with pytest.raises(OSError):
        ctrl.download_images()
    assert ctrl.images == [b"not an image"]
    assert ctrl.decoded == [None]


def test_select_post(controller):
    controller.load_posts()
    with pytest.raises(DownloadError):
        controller.download_images()
    assert controller.select_post(1) is None
    assert controller.select_post(5) is None
    image = controller.select_post(0)
    assert image.size == (90, 60)
    assert controller.selected == 0


def test_set_wallpaper_alternates_slots(controller):
    controller.load_posts()
    with pytest.raises(DownloadError):
        controller.download_images()
    controller.select_post(0)
    first = controller.set_wallpaper()
    second = controller.set_wallpaper()
    third = controller.set_wallpaper()
    assert first.name == "slot0.jpg"
    assert second.name == "slot1.jpg"
    assert third == first
    assert controller.setter.calls == [str(first), str(second), str(first)]
    with Image.open(first) as written:
        assert written.format == "JPEG"
        assert written.size == (32, 24)


def test_set_wallpaper_without_image_raises(controller):
    controller.load_posts()
    with pytest.raises(DownloadError):
        controller.download_images()
    controller.selected = 1
    with pytest.raises(ValueError):
        controller.set_wallpaper()
    assert controller.setter.calls == []


def test_default_cache_dir_uses_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
    assert default_cache_dir() == tmp_path / "redwall"


def test_default_cache_dir_rejects_relative_xdg(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CACHE_HOME", "relative/cache")
    with pytest.raises(ValueError):
        default_cache_dir()