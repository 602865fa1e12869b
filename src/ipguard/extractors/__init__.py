"""
Attribute extractors. Extend by implementing AttributeExtractor and registering.
"""

from ipguard.extractors._json import extract_json_from_llm_output
from ipguard.extractors.base import AttributeExtractor
from ipguard.extractors.vision import VisionAttributeExtractor, image_data_url

EXTRACTOR_REGISTRY = {
    "vision": VisionAttributeExtractor,
}


def get_extractor(name: str = "vision", **kwargs) -> AttributeExtractor | None:
    """Return an extractor instance by name, or None."""
    cls = EXTRACTOR_REGISTRY.get(name)
    return cls(**kwargs) if cls else None


def register_extractor(name: str, extractor_class: type) -> None:
    """Register a new extractor backend (e.g. a local classifier)."""
    EXTRACTOR_REGISTRY[name] = extractor_class


__all__ = [
    "AttributeExtractor",
    "VisionAttributeExtractor",
    "EXTRACTOR_REGISTRY",
    "extract_json_from_llm_output",
    "get_extractor",
    "image_data_url",
    "register_extractor",
]
