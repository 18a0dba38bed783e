"""Unit tests for service.cache module."""

import json
import os
from datetime import datetime, timedelta, UTC

import pytest
from unittest.mock import Mock, patch

from notion_to_html.service.cache import FileCache, MemoryCache
from notion_to_html.service.errors import CacheError


class TestMemoryCache:
    """Test cases for MemoryCache."""

    def test_miss_computes_and_stores(self):
        cache = MemoryCache()
        compute = Mock(return_value={'results': []})

        assert cache.fetch('k', compute) == {'results': []}
        assert 'k' in cache
        compute.assert_called_once()

    def test_hit_skips_compute(self):
        cache = MemoryCache()
        cache.fetch('k', lambda: 'first')
        compute = Mock(return_value='second')

        assert cache.fetch('k', compute) == 'first'
        compute.assert_not_called()

    def test_compute_error_is_not_cached(self):
        cache = MemoryCache()

        with pytest.raises(RuntimeError):
            cache.fetch('k', Mock(side_effect=RuntimeError('boom')))

        assert 'k' not in cache
        assert cache.fetch('k', lambda: 'ok') == 'ok'

    def test_evicts_least_recently_used(self):
        cache = MemoryCache(max_entries=2)
        cache.fetch('a', lambda: 1)
        cache.fetch('b', lambda: 2)
        cache.fetch('a', lambda: 'unused')
        cache.fetch('c', lambda: 3)

        assert 'a' in cache
        assert 'b' not in cache
        assert len(cache) == 2

    def test_invalid_max_entries(self):
        with pytest.raises(ValueError):
            MemoryCache(max_entries=0)

    def test_delete_and_clear(self):
        cache = MemoryCache()
        cache.fetch('a', lambda: 1)
        cache.fetch('b', lambda: 2)

        cache.delete('a')
        cache.delete('missing')
        assert 'a' not in cache
        assert len(cache) == 1

        cache.clear()
        assert len(cache) == 0


class TestFileCache:
    """Test cases for FileCache."""

    def test_creates_cache_dir(self, tmp_path):
        cache_dir = tmp_path / "nested" / "cache"

        FileCache(str(cache_dir))

        assert cache_dir.is_dir()

    def test_miss_writes_json_entry(self, tmp_path):
        cache = FileCache(str(tmp_path))

        value = cache.fetch('block-1', lambda: {'results': [1, 2]})

        assert value == {'results': [1, 2]}
        entry = json.loads((tmp_path / "block-1.json").read_text())
        assert entry['value'] == {'results': [1, 2]}
        assert datetime.fromisoformat(entry['cached_at']).tzinfo is not None

    def test_hit_survives_new_instance(self, tmp_path):
        FileCache(str(tmp_path)).fetch('k', lambda: ['cached'])
        compute = Mock(return_value=['fresh'])

        assert FileCache(str(tmp_path)).fetch('k', compute) == ['cached']
        compute.assert_not_called()

    def test_expired_entry_is_recomputed(self, tmp_path):
        stale = {'cached_at': (datetime.now(UTC) - timedelta(hours=2)).isoformat(), 'value': 'old'}
        (tmp_path / "k.json").write_text(json.dumps(stale))

        value = FileCache(str(tmp_path), max_age_seconds=3600).fetch('k', lambda: 'new')

        assert value == 'new'
        assert json.loads((tmp_path / "k.json").read_text())['value'] == 'new'

    def test_corrupt_entry_raises(self, tmp_path):
        (tmp_path / "k.json").write_text("{not json")

        with pytest.raises(CacheError) as exc_info:
            FileCache(str(tmp_path)).fetch('k', lambda: 'v')

        assert exc_info.value.cache_path.endswith('k.json')

    def test_entry_missing_fields_raises(self, tmp_path):
        (tmp_path / "k.json").write_text(json.dumps({'value': 1}))

        with pytest.raises(CacheError):
            FileCache(str(tmp_path)).fetch('k', lambda: 'v')

    def test_unserializable_value_raises(self, tmp_path):
        with pytest.raises(CacheError):
            FileCache(str(tmp_path)).fetch('k', lambda: object())

    def test_naive_timestamp_is_read_as_utc(self, tmp_path):
        entry = {'cached_at': datetime.now(UTC).replace(tzinfo=None).isoformat(), 'value': 'kept'}
        (tmp_path / "k.json").write_text(json.dumps(entry))
        compute = Mock(return_value='new')

        assert FileCache(str(tmp_path)).fetch('k', compute) == 'kept'
        compute.assert_not_called()

    def test_cached_none_is_a_hit(self, tmp_path):
        cache = FileCache(str(tmp_path))
        compute = Mock(return_value=None)

        assert cache.fetch('k', compute) is None
        assert cache.fetch('k', compute) is None
        compute.assert_called_once()

    def test_failed_write_keeps_previous_entry(self, tmp_path):
        stale = {'cached_at': (datetime.now(UTC) - timedelta(hours=2)).isoformat(), 'value': 'old'}
        (tmp_path / "k.json").write_text(json.dumps(stale))
        cache = FileCache(str(tmp_path), max_age_seconds=3600)

        with patch('notion_to_html.service.cache.os.replace', side_effect=OSError('disk full')):
            with pytest.raises(CacheError):
                cache.fetch('k', lambda: 'new')

        assert json.loads((tmp_path / "k.json").read_text())['value'] == 'old'
        assert os.listdir(tmp_path) == ['k.json']

    def test_unsafe_key_characters_are_replaced(self, tmp_path):
        FileCache(str(tmp_path)).fetch('../a/b c', lambda: 1)

        assert os.listdir(tmp_path) == ['.._a_b_c.json']

    def test_delete_and_clear(self, tmp_path):
        cache = FileCache(str(tmp_path))
        cache.fetch('a', lambda: 1)
        cache.fetch('b', lambda: 2)
        (tmp_path / "notes.txt").write_text("keep")

        cache.delete('a')
        cache.delete('missing')
        assert sorted(os.listdir(tmp_path)) == ['b.json', 'notes.txt']

        cache.clear()
        assert os.listdir(tmp_path) == ['notes.txt']
