from __future__ import annotations

import json

from rpcsx_ui.infrastructure.file_cache import FileCache
from rpcsx_ui.infrastructure.preferences import Preferences


def test_missing_file_reads_defaults(tmp_path):
    prefs = Preferences(tmp_path / "missing.json")
    assert prefs.get_string("k") is None
    assert prefs.get_string("k", "d") == "d"
    assert prefs.get_string_list("k") is None
    assert prefs.get_string_list("k", ["a"]) == ["a"]


def test_round_trip_through_disk(tmp_path):
    path = tmp_path / "nested" / "prefs.json"
    prefs = Preferences(path)
    prefs.put_string("ui_channel", "x")
    prefs.put_string_list("ui_channel_list", ["a", "b"])

    on_disk = json.loads(path.read_text())
    assert on_disk == {"ui_channel": "x", "ui_channel_list": ["a", "b"]}

    other = Preferences(path, cache=FileCache())
    assert other.get_string("ui_channel") == "x"
    assert other.get_string_list("ui_channel_list") == ["a", "b"]


def test_wrong_types_read_as_absent(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"s": ["x"], "l": "x", "mixed": ["a", 1]}))
    prefs = Preferences(path)
    assert prefs.get_string("s", "d") == "d"
    assert prefs.get_string_list("l") is None
    assert prefs.get_string_list("mixed", []) == []


def test_corrupt_document_reads_empty_and_is_replaced_on_write(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("{not json")
    prefs = Preferences(path)
    assert prefs.get_string("k") is None
    prefs.put_string("k", "v")
    assert json.loads(path.read_text()) == {"k": "v"}


def test_non_object_document_reads_empty(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("[1, 2]")
    assert Preferences(path).get_string("k", "d") == "d"


def test_returned_lists_are_copies(tmp_path):
    prefs = Preferences(tmp_path / "prefs.json")
    prefs.put_string_list("k", ["a"])
    prefs.get_string_list("k").append("b")
    assert prefs.get_string_list("k") == ["a"]


def test_cache_picks_up_external_changes(tmp_path):
    path = tmp_path / "doc.json"
    cache = FileCache()
    cache.save_file(path, {"v": 1})
    assert cache.is_loaded(path)
    path.write_text(json.dumps({"v": 2, "extra": True}))
    assert cache.load_file(path, {}) == {"v": 2, "extra": True}
    cache.clear_cache(path)
    assert not cache.is_loaded(path)
