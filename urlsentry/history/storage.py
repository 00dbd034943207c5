import threading
from typing import Dict, Optional, Protocol

import diskcache

from urlsentry.config import CACHE_DIR


class KeyValueStorage(Protocol):
    """Opaque text storage keyed by string. Implementations may be slow or fail."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class DiskCacheStorage:
    """Persistent storage backed by diskcache, shared across processes."""

    def __init__(self, directory: str = CACHE_DIR):
        self._cache = diskcache.Cache(directory)

    def get(self, key: str) -> Optional[str]:
        return self._cache.get(key)

    def set(self, key: str, value: str) -> None:
        self._cache.set(key, value)

    def delete(self, key: str) -> None:
        self._cache.delete(key)

    def close(self) -> None:
        self._cache.close()


class MemoryStorage:
    """Process-local storage, lost on exit."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)
