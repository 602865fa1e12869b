"""Bounded in-process cache. Safe to share between request threads."""

from __future__ import annotations

import copy
import threading
from collections import OrderedDict
from typing import Any, Dict

DEFAULT_MAX_ENTRIES = 1024


class InMemoryObservationCache:
    """Insertion-ordered; the oldest entry is evicted once max_entries is reached."""

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._data: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Dict[str, Any] | None:
        with self._lock:
            value = self._data.get(key)
        # Callers get their own copy so they cannot mutate the cached entry
        return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: Dict[str, Any]) -> None:
        with self._lock:
            self._data.pop(key, None)
            self._data[key] = copy.deepcopy(value)
            while len(self._data) > self.max_entries:
                self._data.popitem(last=False)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
