"""Tests for the JSON file cache helpers."""

import json
import os

import pytest

from jempradio.cache import cache_age, read_cache, write_cache

WEEK = 7 * 24 * 60 * 60
T0 = 1_600_000_000  # fixed mtime for freshness tests


def _backdate(path, mtime=T0):
    os.utime(path, (mtime, mtime))


class TestReadWriteCache:

    def test_roundtrip(self, tmp_path):
        path = tmp_path / "artists.json"
        data = [{"name": "Phish", "slug": "phish"}]
        write_cache(path, data)
        assert read_cache(path) == data

    def test_missing_returns_none(self, tmp_path):
        assert read_cache(tmp_path / "nonexistent.json") is None

    def test_corrupt_json_returns_none(self, tmp_path, warnings_logged):
        path = tmp_path / "corrupt.json"
        path.write_text("not valid json {{{")
        assert read_cache(path) is None
        assert len(warnings_logged) == 1
        assert warnings_logged[0].startswith(f"cannot decode cache {path}")

    def test_write_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "ph" / "nested" / "artists.json"
        write_cache(path, [])
        assert json.loads(path.read_text()) == []

    def test_write_overwrites(self, tmp_path):
        path = tmp_path / "artists.json"
        write_cache(path, [1])
        write_cache(path, [2])
        assert read_cache(path) == [2]

    def test_no_temp_files_left(self, tmp_path):
        write_cache(tmp_path / "artists.json", {"a": 1})
        assert [p.name for p in tmp_path.iterdir()] == ["artists.json"]

    def test_failed_write_removes_temp_file(self, tmp_path):
        path = tmp_path / "artists.json"
        with pytest.raises(TypeError):
            write_cache(path, {object()})
        assert list(tmp_path.glob("*.tmp")) == []
        assert not path.exists()

    def test_failed_write_keeps_previous_content(self, tmp_path):
        path = tmp_path / "artists.json"
        write_cache(path, ["old"])
        with pytest.raises(TypeError):
            write_cache(path, {object()})
        assert read_cache(path) == ["old"]
        assert list(tmp_path.glob("*.tmp")) == []


class TestFreshness:

    def test_cache_age(self, tmp_path):
        path = tmp_path / "a.json"
        write_cache(path, [])
        _backdate(path)
        assert cache_age(path, now=T0 + 90) == 90

    def test_cache_age_missing(self, tmp_path):
        assert cache_age(tmp_path / "missing.json") is None

    def test_fresh_just_inside_window(self, tmp_path):
        path = tmp_path / "a.json"
        write_cache(path, ["fresh"])
        _backdate(path)
        assert read_cache(path, max_age_seconds=WEEK, now=T0 + WEEK - 1) == ["fresh"]

    def test_exact_boundary_is_stale(self, tmp_path):
        path = tmp_path / "a.json"
        write_cache(path, ["stale"])
        _backdate(path)
        assert read_cache(path, max_age_seconds=WEEK, now=T0 + WEEK) is None

    def test_past_boundary_is_stale(self, tmp_path):
        path = tmp_path / "a.json"
        write_cache(path, ["stale"])
        _backdate(path)
        assert read_cache(path, max_age_seconds=WEEK, now=T0 + 2 * WEEK) is None

    def test_zero_max_age_never_expires(self, tmp_path):
        path = tmp_path / "a.json"
        write_cache(path, ["old"])
        _backdate(path)
        assert read_cache(path, max_age_seconds=0, now=T0 + 100 * WEEK) == ["old"]
