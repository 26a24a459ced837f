"""Target URL construction and the hand-off to the external media player."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .errors import PlayerNotFoundError
from .logging_utils import get_logger
from .models import ResultKind, SearchResult


@dataclass(frozen=True)
class LaunchAction:
    program: str
    args: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]


def target_url(result: SearchResult, watch_base: str = "https://youtube.com") -> Optional[str]:
    """Return the page URL the player should open, or None for kinds it cannot play."""
    if not result.identifier:
        return None
    base = watch_base.rstrip("/")
    if result.kind is ResultKind.VIDEO:
        return f"{base}/watch?v={result.identifier}"
    if result.kind is ResultKind.PLAYLIST:
        return f"{base}/playlist?list={result.identifier}"
    # channels and unknown kinds
    return None


def build_launch(url: str, program: str = "mpv", extra_args: List[str] | None = None) -> LaunchAction:
    return LaunchAction(program=program, args=(*(extra_args or []), url))


def execute(action: LaunchAction) -> None:
    """Replace the current process with the player. Does not return on success."""
    path = shutil.which(action.program)
    if path is None:
        raise PlayerNotFoundError(f"'{action.program}' not found on PATH")
    get_logger().info("exec %s", " ".join(action.argv))
    os.execv(path, action.argv)


__all__ = ["LaunchAction", "build_launch", "execute", "target_url"]
