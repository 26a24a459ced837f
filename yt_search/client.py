"""Thin JSON-over-HTTP client for the Invidious directory and search API."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any, List

from .errors import DecodeError, FetchError
from .logging_utils import get_logger
from .models import Instance, SearchResult


class InvidiousClient:
    def __init__(self, timeout: float = 10, user_agent: str = "yt-search/0.1"):
        self.timeout = timeout
        self.user_agent = user_agent

    def get_json(self, url: str) -> Any:
        log = get_logger()
        log.debug("GET %s", url)
        req = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                body = resp.read()
        except urllib.error.HTTPError as e:
            raise FetchError(f"{url} answered HTTP {e.code}") from e
        except (urllib.error.URLError, OSError) as e:
            raise FetchError(f"failed to fetch {url}: {e}") from e
        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DecodeError(f"{url} returned a body that is not JSON: {e}") from e

    def fetch_instances(self, url: str) -> List[Instance]:
        data = self.get_json(url)
        if not isinstance(data, list):
            raise DecodeError("instance directory is not a JSON array")
        return [Instance.from_pair(pair) for pair in data]

    def search(self, base_url: str, query: str) -> List[SearchResult]:
        """Query ``{base_url}/api/v1/search/``; ``query`` must already be URL-encoded."""
        data = self.get_json(f"{base_url.rstrip('/')}/api/v1/search/?q={query}")
        if not isinstance(data, list):
            raise DecodeError(f"search response from {base_url} is not a JSON array")
        return [SearchResult.from_json(item) for item in data]


__all__ = ["InvidiousClient"]
