"""
Facade over commons.io for the CLI.

All methods delegate to LocalFileReader.
"""

import mimetypes
from typing import Any, Tuple

from commons.io.local import LocalFileReader

_default_reader = LocalFileReader()


class FileUtils:
    """Facade for file operations."""

    @staticmethod
    def load_json_from_file(file_path: str) -> Any:
        """Load JSON file. Raises FileNotFoundError when missing."""
        return _default_reader.read_json(file_path)

    @staticmethod
    def load_image(file_path: str) -> Tuple[bytes, str]:
        """Return (image bytes, MIME type guessed from extension, default image/png)."""
        mime_type, _ = mimetypes.guess_type(file_path)
        if not mime_type or not mime_type.startswith("image/"):
            mime_type = "image/png"
        return _default_reader.read_bytes(file_path), mime_type
