"""Configuration management for the search tool."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List

DEFAULT_INSTANCES_URL = "https://api.invidious.io/instances.json"
CACHE_FILENAME = "invidious_instances.json"


def xdg_cache_home() -> Path:
    return Path(os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache")


def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")


def default_config_path() -> Path:
    return xdg_config_home() / "yt_search" / "config.json"


@dataclass
class AppConfig:
    instances_url: str = DEFAULT_INSTANCES_URL
    cache_dir: Path = field(default_factory=lambda: xdg_cache_home() / "yt")
    cache_filename: str = CACHE_FILENAME
    retention_days: int = 14
    timeout_seconds: int = 10
    max_width: int = 90
    watch_base: str = "https://youtube.com"
    player: str = "mpv"
    player_args: List[str] = field(default_factory=list)
    vim_mode: bool = True
    preview: bool = False
    log_level: str = "WARNING"
    user_agent: str = "yt-search/0.1"

    def __post_init__(self):
        # Ensure cache_dir is a Path object
        if not isinstance(self.cache_dir, Path):
            self.cache_dir = Path(self.cache_dir).expanduser()

    @property
    def cache_path(self) -> Path:
        return self.cache_dir / self.cache_filename

    @property
    def retention_seconds(self) -> int:
        return self.retention_days * 24 * 60 * 60

    @classmethod
    def from_file(cls, path: Path | None = None) -> "AppConfig":
        """Loads configuration from a JSON file.

        A missing file yields the defaults. Keys that do not name a field
        are dropped so older or hand-edited files keep loading.
        """
        path = path or default_config_path()
        if not path.exists():
            return cls()
        with open(path, "r") as f:
            data = json.load(f)
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

