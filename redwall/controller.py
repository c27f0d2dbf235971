"""State and actions behind the wallpaper picker window."""

from __future__ import annotations

import io
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from PIL import Image

from redwall.scaler import scale


def default_cache_dir() -> Path:
    """Return the per-user cache directory for the application."""
    if sys.platform.startswith("win"):
        base = os.environ.get("LOCALAPPDATA", "")
        if not base:
            raise OSError("%LOCALAPPDATA% is not defined")
        root = Path(base)
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Caches"
    else:
        xdg = os.environ.get("XDG_CACHE_HOME", "")
        if xdg and not os.path.isabs(xdg):
            raise ValueError("path in $XDG_CACHE_HOME is relative")
        root = Path(xdg) if xdg else Path.home() / ".cache"
    return root / "redwall"


class Controller:
    """Holds the fetched posts and images and applies the chosen wallpaper."""

    def __init__(self, client, setter, screen, cache_dir=None):
        self.client = client
        self.setter = setter
        self.screen = screen
        self.cache_dir = Path(cache_dir) if cache_dir is not None else default_cache_dir()
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.posts = []
        self.images = []
        self.decoded = []
        self.selected = 0
        self.previous = ""
        self._slot = False

    def save_previous(self) -> None:
        """Remember the wallpaper that is set now, for undo."""
        self.previous = self.setter.current()

    def load_posts(self) -> None:
        """Fetch the list of posts."""
        self.posts = self.client.fetch_posts()

    def _download(self, index, post) -> None:
        data = self.client.download_image(post.url)
        self.images[index] = data
        image = Image.open(io.BytesIO(data), formats=("JPEG", "PNG"))
        image.load()
        self.decoded[index] = image

    def download_images(self) -> None:
        """Download and decode all images concurrently; raise the first post's error."""
        posts = list(self.posts)
        self.images = [None] * len(posts)
        self.decoded = [None] * len(posts)
        if not posts:
            return
        with ThreadPoolExecutor(max_workers=len(posts)) as pool:
            futures = [pool.submit(self._download, i, post) for i, post in enumerate(posts)]
        for future in futures:
            if future.exception() is not None:
                raise future.exception()

    def select_post(self, index):
        """Select a post; return its decoded image, or None if there is none yet."""
        if not 0 <= index < len(self.decoded) or self.decoded[index] is None:
            return None
        self.selected = index
        return self.decoded[index]

    def set_wallpaper(self) -> Path:
        """Scale the selected image to the screen, store it and set it as wallpaper."""
        self._slot = not self._slot
        data = self.images[self.selected] if self.selected < len(self.images) else None
        if data is None:
            raise ValueError(f"no image downloaded for post {self.selected}")
        path = self.cache_dir / ("slot0.jpg" if self._slot else "slot1.jpg")
        path.write_bytes(scale(self.screen.width, self.screen.height, data))
        self.setter.set(str(path))
        return path

    def undo(self) -> None:
        """Restore the wallpaper that was set before."""
        self.setter.set(self.previous)