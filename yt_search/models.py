from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from .errors import DecodeError

# Data models for the Invidious instance directory and search API


class ResultKind(str, Enum):
    VIDEO = "video"
    PLAYLIST = "playlist"
    CHANNEL = "channel"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: str) -> "ResultKind":
        try:
            kind = cls(raw)
        except ValueError:
            return cls.OTHER
        return kind


@dataclass
class Instance:
    name: str
    kind: str  # http | https | onion | i2p
    uri: str
    api: Optional[bool] = None

    @property
    def usable(self) -> bool:
        return self.kind.startswith("http") and self.api is True

    @classmethod
    def from_pair(cls, pair: Any) -> "Instance":
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise DecodeError(f"instance entry is not a [name, details] pair: {pair!r}")
        name, body = pair
        if not isinstance(body, dict):
            raise DecodeError(f"instance {name!r} has no details object")
        try:
            kind = body["type"]
            uri = body["uri"]
        except KeyError as e:
            raise DecodeError(f"instance {name!r} is missing {e.args[0]!r}") from e
        api = body.get("api")
        return cls(
            name=str(name),
            kind=str(kind),
            uri=str(uri),
            api=api if isinstance(api, bool) else None,
        )


@dataclass
class Thumbnail:
    quality: Optional[str]
    url: str
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass
class SearchResult:
    kind: ResultKind
    kind_label: str
    title: Optional[str] = None
    identifier: Optional[str] = None
    author: Optional[str] = None
    thumbnails: List[Thumbnail] = field(default_factory=list)
    description: Optional[str] = None
    view_count_text: Optional[str] = None
    length_seconds: Optional[int] = None
    published_text: Optional[str] = None
    video_count: Optional[int] = None

    @classmethod
    def from_json(cls, item: Any) -> "SearchResult":
        if not isinstance(item, dict) or "type" not in item:
            raise DecodeError(f"search result without a type: {item!r}")
        label = str(item["type"])
        kind = ResultKind.parse(label)
        if kind is ResultKind.VIDEO:
            identifier = item.get("videoId")
        elif kind is ResultKind.PLAYLIST:
            identifier = item.get("playlistId")
        elif kind is ResultKind.CHANNEL:
            identifier = item.get("authorId")
        else:
            identifier = None
        return cls(
            kind=kind,
            kind_label=label,
            title=_opt_str(item.get("title")),
            identifier=_opt_str(identifier),
            author=_opt_str(item.get("author")),
            thumbnails=_thumbnails(item),
            description=_opt_str(item.get("description")),
            view_count_text=_opt_str(item.get("viewCountText")),
            length_seconds=_opt_int(item.get("lengthSeconds")),
            published_text=_opt_str(item.get("publishedText")),
            video_count=_opt_int(item.get("videoCount")),
        )


def _opt_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _opt_int(value: Any) -> Optional[int]:
    # bool is an int subclass; it never means a count or a length here
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def _thumbnails(item: dict) -> List[Thumbnail]:
    out: List[Thumbnail] = []
    for thumb in item.get("videoThumbnails") or item.get("authorThumbnails") or []:
        if isinstance(thumb, dict) and thumb.get("url"):
            out.append(
                Thumbnail(
                    quality=_opt_str(thumb.get("quality")),
                    url=str(thumb["url"]),
                    width=_opt_int(thumb.get("width")),
                    height=_opt_int(thumb.get("height")),
                )
            )
    playlist_thumb = item.get("playlistThumbnail")
    if not out and isinstance(playlist_thumb, str) and playlist_thumb:
        out.append(Thumbnail(quality=None, url=playlist_thumb))
    return out


__all__ = [
    "ResultKind",
    "Instance",
    "Thumbnail",
    "SearchResult",
]
