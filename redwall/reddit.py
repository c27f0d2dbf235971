"""HTTP client for fetching wallpaper posts and their images."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from collections.abc import Iterable

from redwall.types import Listing, Post

DEFAULT_SUBREDDIT = "wallpaper"
DEFAULT_USER_AGENT = "redwall/1.0"
LISTING_URL = "https://www.reddit.com/r/{subreddit}/hot.json"


class DownloadError(Exception):
    """An image could not be downloaded."""


def filter_posts(listing: Listing | Iterable[Post]) -> list[Post]:
    """Keep only image posts that are not marked as adult content."""
    posts = listing.children if isinstance(listing, Listing) else listing
    return [post for post in posts if post.post_hint == "image" and not post.over_18]


class Client:
    """Fetches the hot listing of a subreddit and downloads images."""

    def __init__(
        self,
        subreddit: str = DEFAULT_SUBREDDIT,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ) -> None:
        self.subreddit = subreddit
        self.user_agent = user_agent
        self.timeout = timeout

    def _get(self, url: str) -> tuple[int, bytes]:
        request = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
        kwargs = {} if self.timeout is None else {"timeout": self.timeout}
        try:
            with urllib.request.urlopen(request, **kwargs) as response:
                return response.status, response.read()
        except urllib.error.HTTPError as err:
            try:
                body = err.read() if err.fp is not None else b""
            finally:
                err.close()
            return err.code, body

    def fetch_posts(self) -> list[Post]:
        """Return the image posts of the subreddit's hot listing."""
        _, body = self._get(LISTING_URL.format(subreddit=self.subreddit))
        listing = Listing.from_dict(json.loads(body))
        return filter_posts(listing)

    def download_image(self, url: str) -> bytes:
        """Download the bytes at ``url``; anything but HTTP 200 is an error."""
        status, body = self._get(url)
        if status != 200:
            raise DownloadError(f"unexpected status {status} downloading {url}")
        return body