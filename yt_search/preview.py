"""Text preview of the chosen result, shown before the player starts."""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import urljoin

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .formatting import NO_AUTHOR, NO_TITLE, format_duration
from .models import SearchResult, Thumbnail

QUALITY_PREFERENCE = ("medium", "high", "default")


def pick_thumbnail(thumbnails: List[Thumbnail]) -> Optional[Thumbnail]:
    for quality in QUALITY_PREFERENCE:
        for thumb in thumbnails:
            if thumb.quality == quality:
                return thumb
    return thumbnails[0] if thumbnails else None


def thumbnail_url(result: SearchResult, base_url: str) -> Optional[str]:
    """Best thumbnail URL; instance-relative paths are resolved against ``base_url``."""
    thumb = pick_thumbnail(result.thumbnails)
    if thumb is None:
        return None
    if thumb.url.startswith("//"):
        return "https:" + thumb.url
    return urljoin(base_url.rstrip("/") + "/", thumb.url)


def render_preview(result: SearchResult, base_url: str, console: Console) -> None:
    grid = Table.grid(padding=(0, 1))
    grid.add_column(style="bold")
    grid.add_column()
    grid.add_row("Author", Text(result.author or NO_AUTHOR))
    duration = format_duration(result.length_seconds)
    if duration:
        grid.add_row("Duration", duration)
    if result.view_count_text:
        grid.add_row("Views", Text(result.view_count_text))
    if result.published_text:
        grid.add_row("Published", Text(result.published_text))
    if result.video_count is not None:
        grid.add_row("Videos", str(result.video_count))
    grid.add_row("Thumbnail", Text(thumbnail_url(result, base_url) or "-"))
    console.print(
        Panel(grid, title=Text(result.title or NO_TITLE), subtitle=result.kind_label)
    )


__all__ = ["pick_thumbnail", "render_preview", "thumbnail_url"]
