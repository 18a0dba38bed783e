"""Read-through caches for Notion API responses.

Both caches implement ``fetch(key, compute_fn)``: return the cached value
when present and fresh, otherwise call ``compute_fn``, store its result and
return it. The assembler uses this to avoid re-listing block children.
"""

import json
import logging
import os
import re
import tempfile
from collections import OrderedDict
from datetime import datetime, timedelta, UTC
from typing import Any, Callable, Optional

from .errors import CacheError

logger = logging.getLogger(__name__)

# Returned by FileCache._read when no fresh entry exists; a cached None is a valid value
_MISSING = object()


class MemoryCache:
    """In-process cache backed by an ordered dict.

    Example:
        >>> cache = MemoryCache(max_entries=500)
        >>> children = cache.fetch(block_id, lambda: api.fetch_block_children(block_id))
    """

    def __init__(self, max_entries: Optional[int] = None):
        """Initialize the cache.

        Args:
            max_entries: Evict the oldest entry beyond this many (None = unbounded)
        """
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.max_entries = max_entries
        self._entries: OrderedDict[str, Any] = OrderedDict()

    def fetch(self, key: str, compute_fn: Callable[[], Any]) -> Any:
        if key in self._entries:
            logger.debug(f"Cache hit: {key}")
            self._entries.move_to_end(key)
            return self._entries[key]

        logger.debug(f"Cache miss: {key}")
        value = compute_fn()
        self._entries[key] = value

        if self.max_entries is not None:
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Cache evicted: {evicted}")

        return value

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class FileCache:
    """JSON-file cache that survives process restarts.

    Each key is stored as ``<cache_dir>/<key>.json`` containing
    ``{"cached_at": "<ISO timestamp>", "value": ...}``. Entries older than
    ``max_age_seconds`` are recomputed.

    Example:
        >>> cache = FileCache(".notion-cache", max_age_seconds=600)
        >>> config = NotionConfig(api_token=token, database_id=db, cache=cache)
    """

    def __init__(self, cache_dir: str, max_age_seconds: int = 3600):
        """Initialize the cache and create cache_dir if needed.

        Raises:
            CacheError: If the cache directory cannot be created
        """
        self.cache_dir = os.path.abspath(cache_dir)
        self.max_age_seconds = max_age_seconds
        try:
            os.makedirs(self.cache_dir, exist_ok=True)
            logger.debug(f"Cache directory ready: {self.cache_dir}")
        except OSError as e:
            raise CacheError(self.cache_dir, f"Failed to create cache directory: {e}")

    def _path_for(self, key: str) -> str:
        safe_key = re.sub(r'[^A-Za-z0-9_.-]', '_', str(key))
        return os.path.join(self.cache_dir, f"{safe_key}.json")

    def _read(self, path: str) -> Any:
        """Return the cached value, or _MISSING when missing or expired."""
        if not os.path.exists(path):
            return _MISSING

        try:
            with open(path, 'r', encoding='utf-8') as f:
                entry = json.load(f)
            cached_at = datetime.fromisoformat(entry['cached_at'])
            value = entry['value']
            if cached_at.tzinfo is None:
                cached_at = cached_at.replace(tzinfo=UTC)
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise CacheError(path, f"Failed to read or parse cache entry: {e}")

        age = datetime.now(UTC) - cached_at
        if age > timedelta(seconds=self.max_age_seconds):
            logger.debug(f"Cache entry expired ({int(age.total_seconds())}s old): {path}")
            return _MISSING

        return value

    def fetch(self, key: str, compute_fn: Callable[[], Any]) -> Any:
        path = self._path_for(key)
        value = self._read(path)
        if value is not _MISSING:
            logger.debug(f"Cache hit: {key}")
            return value

        logger.debug(f"Cache miss: {key}")
        value = compute_fn()
        entry = {'cached_at': datetime.now(UTC).isoformat(), 'value': value}
        try:
            serialized = json.dumps(entry)
        except (TypeError, ValueError) as e:
            raise CacheError(path, f"Failed to serialize cache entry: {e}")

        self._write(path, serialized)
        return value

    def _write(self, path: str, serialized: str) -> None:
        """Write an entry atomically: a temp file in cache_dir replaces path."""
        temp_path = None
        try:
            fd, temp_path = tempfile.mkstemp(dir=self.cache_dir, prefix=".", suffix=".tmp")
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(serialized)
            os.replace(temp_path, path)
        except OSError as e:
            if temp_path and os.path.exists(temp_path):
                os.remove(temp_path)
            raise CacheError(path, f"Failed to write cache entry: {e}")

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        if os.path.exists(path):
            os.remove(path)

    def clear(self) -> None:
        for name in os.listdir(self.cache_dir):
            if name.endswith('.json'):
                os.remove(os.path.join(self.cache_dir, name))
