"""
Cache utility module for nflverse_fetch.

This module provides the storage tiers used by the downloader to avoid
fetching the same release file twice. Tables are keyed by a hash of the
request URL and checked for freshness lazily, on every read.

Tiers:
- ``NullCache``: caching disabled
- ``MemoryCache``: process-wide dictionary guarded by a lock
- ``FilesystemCache``: one Parquet file per key inside the cache directory
"""

import hashlib
import logging
import shutil
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pandas as pd

from ..config import CacheMode, NFLReadConfig, get_config

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

CACHE_FILE_EXTENSION = "parquet"


def make_cache_key(url: str) -> str:
    """
    Generate a cache key from a request URL.

    Args:
        url: Full request URL

    Returns:
        Hex-encoded MD5 digest of the URL
    """
    return hashlib.md5(url.encode("utf-8")).hexdigest()


def discard_cache_error(error: Optional[Exception], key: str) -> None:
    """Drop a failed cache write after logging it; the cache is best-effort."""
    if error is not None:
        logger.warning(f"Ignoring cache write failure for {key}: {error}")


@dataclass
class CacheEntry:
    """A cached table and the time it was stored."""
    table: pd.DataFrame
    timestamp: float


class MemoryStore:
    """Key to CacheEntry mapping with a single mutual-exclusion lock."""

    def __init__(self):
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[CacheEntry]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, entry: CacheEntry) -> None:
        with self._lock:
            self._entries[key] = entry

    def clear(self, pattern: Optional[str] = None) -> None:
        with self._lock:
            if pattern is None:
                self._entries.clear()
            else:
                self._entries = {k: v for k, v in self._entries.items() if pattern not in k}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# Shared by every MemoryCache that is not given its own store
_shared_store = MemoryStore()


class BaseCache:
    """Common get/set/clear contract for every tier."""

    mode: CacheMode

    def __init__(self, config: NFLReadConfig, clock: Clock = time.time):
        self.config = config
        self.clock = clock

    def is_fresh(self, timestamp: float) -> bool:
        return self.clock() - timestamp < self.config.cache_duration

    def get(self, key: str) -> Optional[pd.DataFrame]:
        raise NotImplementedError

    def set(self, key: str, table: pd.DataFrame) -> None:
        raise NotImplementedError

    def clear(self, pattern: Optional[str] = None) -> None:
        raise NotImplementedError

    def __len__(self) -> int:
        return 0


class NullCache(BaseCache):
    """Caching turned off: nothing is ever stored."""

    mode = CacheMode.OFF

    def get(self, key: str) -> Optional[pd.DataFrame]:
        return None

    def set(self, key: str, table: pd.DataFrame) -> None:
        pass

    def clear(self, pattern: Optional[str] = None) -> None:
        pass


class MemoryCache(BaseCache):
    """In-process cache. Expired entries stay in the store until overwritten or cleared."""

    mode = CacheMode.MEMORY

    def __init__(self, config: NFLReadConfig, clock: Clock = time.time,
                 store: Optional[MemoryStore] = None):
        super().__init__(config, clock)
        self.store = store if store is not None else _shared_store

    def get(self, key: str) -> Optional[pd.DataFrame]:
        entry = self.store.get(key)
        if entry is None or not self.is_fresh(entry.timestamp):
            return None
        logger.debug(f"Memory cache hit: {key}")
        return entry.table.copy()

    def set(self, key: str, table: pd.DataFrame) -> None:
        self.store.put(key, CacheEntry(table=table.copy(), timestamp=self.clock()))
        logger.debug(f"Memory cache stored: {key}")

    def clear(self, pattern: Optional[str] = None) -> None:
        self.store.clear(pattern)
        if pattern is None:
            logger.info("Cleared memory cache")
        else:
            logger.info(f"Cleared memory cache entries matching: {pattern}")

    def __len__(self) -> int:
        return len(self.store)


class FilesystemCache(BaseCache):
    """Parquet files named after their key; file age comes from the modification time."""

    mode = CacheMode.FILESYSTEM

    @property
    def cache_dir(self) -> Path:
        return Path(self.config.cache_dir)

    def get_cache_path(self, key: str) -> Path:
        """
        Get the cache file path for a given key.

        Args:
            key: Cache key

        Returns:
            Path to the cache file
        """
        return self.cache_dir / f"{key}.{CACHE_FILE_EXTENSION}"

    def is_cached(self, key: str) -> bool:
        """Check if a file exists for the key and is younger than the cache duration."""
        cache_path = self.get_cache_path(key)
        if not cache_path.exists():
            return False
        return self.is_fresh(cache_path.stat().st_mtime)

    def get(self, key: str) -> Optional[pd.DataFrame]:
        if not self.is_cached(key):
            return None

        cache_path = self.get_cache_path(key)
        try:
            table = pd.read_parquet(cache_path, engine="pyarrow")
        except Exception as e:
            logger.warning(f"Failed to load cache {cache_path}: {e}")
            return None

        logger.debug(f"Loaded cache: {cache_path}")
        return table

    def _write(self, key: str, table: pd.DataFrame) -> Optional[Exception]:
        """Write the table for a key, returning the error instead of raising it."""
        cache_path = self.get_cache_path(key)
        try:
            cache_path.parent.mkdir(parents=True, exist_ok=True)
            table.to_parquet(cache_path, index=False, engine="pyarrow")
        except Exception as e:
            return e
        logger.debug(f"Saved cache: {cache_path}")
        return None

    def set(self, key: str, table: pd.DataFrame) -> None:
        discard_cache_error(self._write(key, table), key)

    def clear(self, pattern: Optional[str] = None) -> None:
        if not self.cache_dir.exists():
            return

        if pattern is None:
            shutil.rmtree(self.cache_dir)
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"Cleared all cache in {self.cache_dir}")
            return

        for path in self.cache_dir.iterdir():
            if path.is_file() and pattern in path.name:
                path.unlink(missing_ok=True)
        logger.info(f"Cleared cache files matching: {pattern}")

    def __len__(self) -> int:
        if not self.cache_dir.exists():
            return 0
        return len(list(self.cache_dir.glob(f"*.{CACHE_FILE_EXTENSION}")))


_TIERS = {
    CacheMode.OFF: NullCache,
    CacheMode.MEMORY: MemoryCache,
    CacheMode.FILESYSTEM: FilesystemCache,
}


def build_cache(config: Optional[NFLReadConfig] = None, clock: Clock = time.time) -> BaseCache:
    """Create the cache tier selected by the configuration."""
    config = config or get_config()
    return _TIERS[config.cache_mode](config, clock)


def clear_cache(pattern: Optional[str] = None, config: Optional[NFLReadConfig] = None) -> None:
    """
    Clear cache entries.

    The shared memory store is always cleared; the cache directory is
    cleared too when the filesystem tier is active.

    Args:
        pattern: Remove only keys containing this substring (None = everything)
        config: Configuration to use (None = active configuration)
    """
    config = config or get_config()
    MemoryCache(config).clear(pattern)
    if config.cache_mode == CacheMode.FILESYSTEM:
        FilesystemCache(config).clear(pattern)


def cache_info(config: Optional[NFLReadConfig] = None) -> Dict[str, Any]:
    """
    Get information about cached data.

    Args:
        config: Configuration to inspect (None = active configuration)

    Returns:
        Dictionary with cache information
    """
    config = config or get_config()
    cache = build_cache(config)
    return {
        "cache_mode": config.cache_mode.value,
        "cache_dir": str(config.cache_dir),
        "cache_duration": config.cache_duration,
        "entries": len(cache),
    }
