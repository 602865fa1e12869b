"""File-backed cache: one JSON document per content hash."""

from __future__ import annotations

import os
import re
from typing import Any, Dict, Optional

from commons.io.base import FileReader, FileWriter
from commons.io.local import LocalFileReader, LocalFileWriter
from commons.logging_utils import get_logger

logger = get_logger(__name__)

_HEX_KEY = re.compile(r"^[0-9a-f]{8,128}$")


class FileObservationCache:
    """Survives restarts. Keys must be hex digests (see content_hash)."""

    def __init__(
        self,
        directory: str,
        reader: Optional[FileReader] = None,
        writer: Optional[FileWriter] = None,
    ):
        self.directory = directory
        self.reader = reader or LocalFileReader()
        self.writer = writer or LocalFileWriter()

    def _path(self, key: str) -> str:
        if not _HEX_KEY.match(key or ""):
            raise ValueError(f"Cache key must be a lowercase hex digest, got {key!r}")
        return os.path.join(self.directory, f"{key}.json")

    def get(self, key: str) -> Dict[str, Any] | None:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        data = self.reader.read_json(path)
        if not isinstance(data, dict):
            logger.warning("Ignoring corrupt cache entry %s", path)
            return None
        return data

    def set(self, key: str, value: Dict[str, Any]) -> None:
        self.writer.write_json(value, self._path(key))

    def __contains__(self, key: str) -> bool:
        return os.path.exists(self._path(key))

    def clear(self) -> None:
        if not os.path.isdir(self.directory):
            return
        for name in os.listdir(self.directory):
            if name.endswith(".json"):
                self.writer.remove(os.path.join(self.directory, name))
