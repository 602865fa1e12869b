"""
Observation caches keyed by image content hash. Extend by implementing ObservationCache
and registering a backend name.
"""

import os
from typing import Any, Dict, Optional

from commons.config import config as default_config
from commons.config import get_section
from commons.constants import Constants as Co

from ipguard._paths import project_path
from ipguard.cache.base import ObservationCache, content_hash
from ipguard.cache.file import FileObservationCache
from ipguard.cache.memory import DEFAULT_MAX_ENTRIES, InMemoryObservationCache


def _memory(section: Dict[str, Any]) -> ObservationCache:
    return InMemoryObservationCache(max_entries=int(section.get("max_entries") or DEFAULT_MAX_ENTRIES))


def _file(section: Dict[str, Any]) -> ObservationCache:
    directory = section.get("dir") or "resources/observation_cache"
    if not os.path.isabs(directory):
        directory = project_path(*directory.split("/"))
    return FileObservationCache(directory)


CACHE_BACKENDS = {
    "memory": _memory,
    "file": _file,
}


def get_cache(cfg: Optional[Dict[str, Any]] = None) -> ObservationCache:
    """Build the cache backend named by cache.backend (default: memory)."""
    section = get_section(default_config if cfg is None else cfg, Co.CACHE)
    backend = (section.get("backend") or "memory").strip().lower()
    builder = CACHE_BACKENDS.get(backend)
    if builder is None:
        raise ValueError(f"Unknown cache backend {backend!r}. Supported: {list(CACHE_BACKENDS)}")
    return builder(section)


__all__ = [
    "CACHE_BACKENDS",
    "FileObservationCache",
    "InMemoryObservationCache",
    "ObservationCache",
    "content_hash",
    "get_cache",
]
