"""Observation cache protocol and content hashing."""

import hashlib
from typing import Any, Dict, Protocol


def content_hash(image_bytes: bytes) -> str:
    """SHA-256 hex digest of the image content; identical uploads share a cache key."""
    return hashlib.sha256(image_bytes).hexdigest()


class ObservationCache(Protocol):
    """content hash -> raw vision output. Owned by the service layer, never by the router."""

    def get(self, key: str) -> Dict[str, Any] | None:
        ...

    def set(self, key: str, value: Dict[str, Any]) -> None:
        ...

    def __contains__(self, key: str) -> bool:
        ...

    def clear(self) -> None:
        ...
