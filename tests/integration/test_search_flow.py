import json
from unittest.mock import patch

import pytest

from conftest import DIRECTORY_URL, INSTANCES_PAYLOAD, SEARCH_PAYLOAD, USABLE_URIS, routed_urlopen


def _routes():
    routes = {DIRECTORY_URL: INSTANCES_PAYLOAD}
    for uri in USABLE_URIS:
        routes[f"{uri}/api/v1/search/"] = SEARCH_PAYLOAD
    return routes


@pytest.fixture()
def launched(monkeypatch):
    actions = []
    monkeypatch.setattr("yt_search.cli.execute", actions.append)
    return actions


def _choose(index):
    def picker(results, width, **options):
        return results[index] if index is not None else None

    return picker


@pytest.mark.integration
def test_search_pick_and_launch(run_cli, isolated_home, monkeypatch, launched):
    monkeypatch.setattr("yt_search.cli.pick", _choose(0))
    calls = []
    with patch("urllib.request.urlopen", side_effect=routed_urlopen(_routes(), calls)):
        code, out, err = run_cli(["never", "gonna"])
    assert code == 0
    assert calls[0] == DIRECTORY_URL
    assert calls[1].endswith("/api/v1/search/?q=never+gonna")
    assert [a.argv for a in launched] == [["mpv", "https://youtube.com/watch?v=dQw4w9WgXcQ"]]
    cache = isolated_home / "cache" / "yt" / "invidious_instances.json"
    assert json.loads(cache.read_text()) == USABLE_URIS


@pytest.mark.integration
def test_second_run_uses_cache(run_cli, monkeypatch, launched):
    monkeypatch.setattr("yt_search.cli.pick", _choose(2))
    calls = []
    with patch("urllib.request.urlopen", side_effect=routed_urlopen(_routes(), calls)):
        run_cli(["first"])
        code, out, err = run_cli(["second"])
    assert code == 0
    assert calls.count(DIRECTORY_URL) == 1
    assert launched[-1].argv[-1] == "https://youtube.com/playlist?list=PL123"


@pytest.mark.integration
def test_cancel_exits_zero_without_launch(run_cli, monkeypatch, launched):
    monkeypatch.setattr("yt_search.cli.pick", _choose(None))
    with patch("urllib.request.urlopen", side_effect=routed_urlopen(_routes())):
        code, out, err = run_cli(["rick"])
    assert code == 0
    assert launched == []


@pytest.mark.integration
def test_channel_choice_exits_zero_without_launch(run_cli, monkeypatch, launched):
    monkeypatch.setattr("yt_search.cli.pick", _choose(3))
    with patch("urllib.request.urlopen", side_effect=routed_urlopen(_routes())):
        code, out, err = run_cli(["rick"])
    assert code == 0
    assert launched == []
    assert "Cannot open 'channel' results" in out


@pytest.mark.integration
def test_no_usable_instances(run_cli, monkeypatch, launched):
    routes = {DIRECTORY_URL: [["b", {"type": "http", "uri": "http://b", "api": False}]]}
    with patch("urllib.request.urlopen", side_effect=routed_urlopen(routes)):
        code, out, err = run_cli(["rick"])
    assert code == 1
    assert "no usable instances" in err
    assert launched == []


@pytest.mark.integration
def test_missing_player_is_fatal(run_cli, monkeypatch):
    monkeypatch.setattr("yt_search.cli.pick", _choose(0))
    monkeypatch.setattr("yt_search.player.shutil.which", lambda name: None)
    with patch("urllib.request.urlopen", side_effect=routed_urlopen(_routes())):
        code, out, err = run_cli(["rick"])
    assert code == 1
    assert "'mpv' not found" in err
