"""Terminal wallpaper picker."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path
from urllib.parse import urlparse

from redwall.kde import KDESetter
from redwall.reddit import Client, DownloadError
from redwall.scaler import scale
from redwall.screen import Screen, ScreenError

_ERRORS = (
    OSError,
    ValueError,
    EOFError,
    subprocess.SubprocessError,
    ScreenError,
    DownloadError,
)


def image_extension(url: str) -> str:
    """Return the extension of the last element of the URL's path, dot included."""
    name = urlparse(url).path.rsplit("/", 1)[-1]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _run(client: Client, setter: KDESetter) -> int:
    screen = Screen.detect()
    print(f"Screen size {screen.width}x{screen.height}")

    posts = client.fetch_posts()
    for index, post in enumerate(posts):
        print(f"[{index}] {post.title} - {post.url}")

    print("Choose a wallpaper")
    choice = int(input().strip())
    if not 0 <= choice < len(posts):
        print(f"Post {choice} not found")
        return 1

    url = posts[choice].url
    image_path = Path("image" + image_extension(url))
    data = client.download_image(url)
    image_path.write_bytes(scale(screen.width, screen.height, data))

    previous = setter.current()
    setter.set(os.path.abspath(image_path))

    print("Keep new Wallpaper? (yes)", file=sys.stderr)
    try:
        words = input().split()
    except EOFError:
        print("Error: no answer given")
        words = []
    if words[:1] != ["yes"]:
        setter.set(previous)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Pick a post in the terminal, set it as wallpaper and confirm or revert."""
    argparse.ArgumentParser(
        prog="redwall",
        description="Pick a wallpaper from the hot posts and set it on KDE Plasma.",
    ).parse_args(argv)
    try:
        return _run(Client(), KDESetter())
    except _ERRORS as err:
        print("Error:", err)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())