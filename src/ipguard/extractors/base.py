"""Protocol for attribute extractors. Implement to plug in another vision backend."""

from typing import Any, Dict, Protocol


class AttributeExtractor(Protocol):
    """Produce raw (untrusted) attribute fields for one image."""

    def extract(self, image_bytes: bytes, mime_type: str = "image/png") -> Dict[str, Any]:
        """Return a mapping with the six attribute flags, optional confidences, title, description."""
        ...
