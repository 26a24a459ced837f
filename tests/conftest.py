import io
import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

# Ensure project root on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from yt_search.models import SearchResult  # noqa: E402

DIRECTORY_URL = "https://api.invidious.io/instances.json"

INSTANCES_PAYLOAD = [
    ["a.example", {"type": "https", "uri": "https://a.example", "api": True}],
    ["b.example", {"type": "http", "uri": "http://b.example", "api": False}],
    ["c.example", {"type": "ftp", "uri": "ftp://c.example", "api": True}],
    ["d.onion", {"type": "onion", "uri": "http://d.onion", "api": True}],
    ["e.example", {"type": "https", "uri": "https://e.example", "api": None}],
    ["f.example", {"type": "https", "uri": "https://f.example/", "api": True}],
]

USABLE_URIS = ["https://a.example", "https://f.example"]

SEARCH_PAYLOAD = [
    {
        "type": "video",
        "title": "Never Gonna Give You Up",
        "videoId": "dQw4w9WgXcQ",
        "author": "Rick Astley",
        "videoThumbnails": [
            {"quality": "maxres", "url": "/vi/dQw4w9WgXcQ/maxres.jpg", "width": 1280, "height": 720},
            {"quality": "medium", "url": "/vi/dQw4w9WgXcQ/mqdefault.jpg", "width": 320, "height": 180},
        ],
        "description": "The official video",
        "viewCountText": "1.5B views",
        "lengthSeconds": 213,
        "publishedText": "14 years ago",
    },
    {"type": "video", "videoId": "sparse00001"},
    {
        "type": "playlist",
        "title": "Eighties hits",
        "playlistId": "PL123",
        "author": "Someone",
        "videoCount": 42,
        "playlistThumbnail": "https://i.ytimg.com/vi/x/hqdefault.jpg",
    },
    {"type": "channel", "author": "Rick Astley", "authorId": "UCuAXFkgsw1L7xaCfnd5JJOw"},
]


@pytest.fixture()
def search_results():
    return [SearchResult.from_json(item) for item in SEARCH_PAYLOAD]


@pytest.fixture()
def console():
    return Console(file=io.StringIO(), width=120)


def fake_response(payload):
    """A urlopen() return value usable as a context manager."""
    body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    resp = MagicMock()
    resp.read.return_value = body
    resp.__enter__.return_value = resp
    return resp


def routed_urlopen(routes, calls=None):
    """Build a urlopen replacement answering by URL prefix."""

    def _urlopen(req, timeout=None):
        url = req.full_url
        if calls is not None:
            calls.append(url)
        for prefix, payload in routes.items():
            if url.startswith(prefix):
                if isinstance(payload, Exception):
                    raise payload
                return fake_response(payload)
        raise AssertionError(f"unexpected request {url}")

    return _urlopen


@pytest.fixture()
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return tmp_path


@pytest.fixture()
def run_cli(capsys, isolated_home):
    from yt_search.cli import run_cli as _run

    def runner(args):
        try:
            code = _run(args)
        except SystemExit as e:
            code = e.code
        out, err = capsys.readouterr()
        return code, out, err

    return runner


@pytest.fixture(autouse=True)
def fresh_logger():
    """Drop the package logger's handler so it never writes to a closed capture stream."""
    yield
    import logging

    from yt_search import logging_utils

    logger = logging.getLogger("yt_search")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logging_utils._LOGGER = None
    logging_utils._APPLIED = None
