from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .errors import CacheCorruptError
from .logging_utils import get_logger


class CacheStore:
    """A single JSON file holding a list of strings, aged by its mtime.

    The file is rewritten whole on every save, so the modification time is
    the moment the current content was stored.
    """

    def __init__(
        self,
        path: Path,
        retention_seconds: float,
        clock: Callable[[], float] = time.time,
    ):
        self.path = Path(path)
        self.retention_seconds = retention_seconds
        self._clock = clock

    def get(self) -> Optional[Tuple[List[str], float]]:
        if not self.path.exists():
            return None
        stored_at = self.path.stat().st_mtime
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CacheCorruptError(
                f"cache file {self.path} is not valid JSON ({e}); delete it to rebuild"
            ) from e
        if not isinstance(data, list) or not all(isinstance(x, str) for x in data):
            raise CacheCorruptError(
                f"cache file {self.path} is not a list of strings; delete it to rebuild"
            )
        return data, stored_at

    def load(self) -> Optional[List[str]]:
        log = get_logger()
        entry = self.get()
        if entry is None:
            log.debug("Cache miss: %s does not exist", self.path)
            return None
        urls, stored_at = entry
        age = self._clock() - stored_at
        if age > self.retention_seconds:
            log.debug("Cache expired: %s is %.0fs old", self.path, age)
            return None
        if not urls:
            log.debug("Cache %s holds no instances", self.path)
            return None
        return urls

    def save(self, urls: List[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(list(urls)), encoding="utf-8")
        get_logger().debug("Cached %d instances in %s", len(urls), self.path)


__all__ = ["CacheStore"]
