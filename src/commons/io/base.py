"""Protocols for file I/O. Implement these to back the observation cache with S3, Redis dumps, etc."""

from typing import Any, Protocol


class FileReader(Protocol):
    """Read text, bytes or JSON from a source (local path, URL, etc.)."""

    def read_text(self, path: str) -> str | None:
        ...

    def read_bytes(self, path: str) -> bytes:
        ...

    def read_json(self, path: str) -> Any:
        ...


class FileWriter(Protocol):
    """Write JSON to a destination and remove entries."""

    def write_json(self, data: Any, path: str) -> None:
        ...

    def ensure_dir(self, path: str) -> None:
        ...

    def remove(self, path: str) -> None:
        ...
