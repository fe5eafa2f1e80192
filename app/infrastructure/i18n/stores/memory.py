"""In-memory translation cache store."""

import copy
from threading import Lock
from typing import Any, Dict, Optional

from infrastructure.i18n.stores.base import TranslationCacheStore


class MemoryCacheStore(TranslationCacheStore):
    """Process-local store for development and tests.

    Values are deep-copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self):
        self._data: Dict[str, Dict[str, Any]] = {}
        self._lock = Lock()

    def read(self, key: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            if key not in self._data:
                return None
            return copy.deepcopy(self._data[key])

    def write(self, key: str, data: Dict[str, Any]) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(data)

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def keys(self) -> list:
        with self._lock:
            return list(self._data)
