"""Data model of the subreddit listing JSON."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _obj(data: Any) -> dict:
    return data if isinstance(data, dict) else {}


def _items(data: dict, key: str) -> list:
    value = data.get(key)
    return value if isinstance(value, list) else []


@dataclass(frozen=True)
class ImageSource:
    """One rendition of an image: its address and pixel size."""

    url: str = ""
    width: int = 0
    height: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> ImageSource:
        data = _obj(data)
        return cls(data.get("url") or "", data.get("width") or 0, data.get("height") or 0)


@dataclass(frozen=True)
class PreviewImage:
    """A preview image with its full-size source and smaller resolutions."""

    source: ImageSource = field(default_factory=ImageSource)
    resolutions: tuple[ImageSource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> PreviewImage:
        data = _obj(data)
        return cls(
            ImageSource.from_dict(data.get("source")),
            tuple(map(ImageSource.from_dict, _items(data, "resolutions"))),
        )


@dataclass(frozen=True)
class Preview:
    """The preview block of a post."""

    images: tuple[PreviewImage, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Preview:
        return cls(tuple(map(PreviewImage.from_dict, _items(_obj(data), "images"))))


@dataclass(frozen=True)
class Post:
    """A single subreddit post."""

    id: str = ""
    title: str = ""
    url: str = ""
    post_hint: str = ""
    score: int = 0
    over_18: bool = False
    preview: Preview = field(default_factory=Preview)

    @classmethod
    def from_dict(cls, data: Any) -> Post:
        data = _obj(data)
        return cls(
            id=data.get("id") or "",
            title=data.get("title") or "",
            url=data.get("url") or "",
            post_hint=data.get("post_hint") or "",
            score=data.get("score") or 0,
            over_18=bool(data.get("over_18")),
            preview=Preview.from_dict(data.get("preview")),
        )


@dataclass(frozen=True)
class Listing:
    """A page of posts as returned by the listing endpoint."""

    after: str = ""
    children: tuple[Post, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Listing:
        body = _obj(_obj(data).get("data"))
        return cls(
            body.get("after") or "",
            tuple(Post.from_dict(_obj(c).get("data")) for c in _items(body, "children")),
        )