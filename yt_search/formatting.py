from __future__ import annotations

from typing import Optional

from .models import ResultKind, SearchResult

MAX_WIDTH = 90

# Percent of the usable width given to each clamped column
TITLE_PCT = 60
DURATION_PCT = 7
VIEWS_PCT = 5
PUBLISHED_PCT = 8
AUTHOR_PCT = 15

NO_TITLE = "<no-title>"
NO_AUTHOR = "<no-author>"
NO_PUBLISHED = "_"
SEPARATOR = " | "


def usable_width(terminal_width: int, max_width: int = MAX_WIDTH) -> int:
    return max(0, min(max_width, terminal_width))


def column_width(pct: int, terminal_width: int, max_width: int = MAX_WIDTH) -> int:
    return usable_width(terminal_width, max_width) * pct // 100


def clamp(text: str, width: int) -> str:
    """Cut ``text`` to ``width`` characters and pad it with spaces to exactly that."""
    return text[:width].ljust(width)


def format_duration(seconds: Optional[int]) -> str:
    if seconds is None:
        return ""
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 60 * 20:
        return f"{seconds // 60}min{seconds % 60}s"
    if seconds < 60 * 60:
        return f"{seconds // 60}min"
    return f"{seconds // 3600}h{seconds % 3600 // 60}min"


def short_view_count(text: Optional[str]) -> str:
    # "1.2M views" -> "1.2M"
    if not text:
        return ""
    return text.split(" ", 1)[0]


def single_line(text: Optional[str]) -> str:
    if not text:
        return ""
    return " ".join(text.split())


def format_result(
    result: SearchResult, terminal_width: int, max_width: int = MAX_WIDTH
) -> str:
    """Render one picker line for ``result``.

    Videos get fixed-width columns scaled to ``min(max_width, terminal_width)``;
    every other kind gets a ``[kind] title`` line.
    """
    title = result.title or NO_TITLE
    if result.kind is not ResultKind.VIDEO:
        return f"[{result.kind_label}] {single_line(title)}"

    def col(text: str, pct: int) -> str:
        return clamp(text, column_width(pct, terminal_width, max_width))

    return SEPARATOR.join(
        [
            col(single_line(title), TITLE_PCT),
            col(format_duration(result.length_seconds), DURATION_PCT),
            col(short_view_count(result.view_count_text), VIEWS_PCT),
            col(result.published_text or NO_PUBLISHED, PUBLISHED_PCT),
            col(single_line(result.author) or NO_AUTHOR, AUTHOR_PCT),
            single_line(result.description),
        ]
    )


__all__ = [
    "MAX_WIDTH",
    "clamp",
    "column_width",
    "format_duration",
    "format_result",
    "short_view_count",
    "usable_width",
]
