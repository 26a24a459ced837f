"""Exception hierarchy shared across the package."""

from __future__ import annotations


class YtSearchError(RuntimeError):
    """Base class for fatal, user-reportable failures."""


class FetchError(YtSearchError):
    pass


class DecodeError(YtSearchError):
    pass


class CacheCorruptError(YtSearchError):
    pass


class NoInstancesError(YtSearchError):
    pass


class PlayerNotFoundError(YtSearchError):
    pass


__all__ = [
    "YtSearchError",
    "FetchError",
    "DecodeError",
    "CacheCorruptError",
    "NoInstancesError",
    "PlayerNotFoundError",
]
