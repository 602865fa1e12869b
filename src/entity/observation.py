"""Attribute observation: normalized facts about one image, as fed to the classifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

BOOLEAN_FIELDS = (
    "is_ai_generated",
    "is_animation",
    "has_human_face",
    "is_full_face_visible",
    "is_famous_person",
    "has_known_brand_or_character",
)

CONFIDENCE_FIELDS = (
    "source_confidence",
    "animation_confidence",
    "face_confidence",
    "brand_confidence",
)


@dataclass(frozen=True)
class AttributeObservation:
    """
    Six strict booleans plus optional confidences in [0, 1].
    Build through ipguard.validation.normalize_observation, which re-applies
    is_full_face_visible => has_human_face; constructing directly skips that.
    """
    is_ai_generated: bool = False
    is_animation: bool = False
    has_human_face: bool = False
    is_full_face_visible: bool = False
    is_famous_person: bool = False
    has_known_brand_or_character: bool = False
    # Only used for ambiguity flagging, never for category selection
    source_confidence: Optional[float] = None
    animation_confidence: Optional[float] = None
    face_confidence: Optional[float] = None
    brand_confidence: Optional[float] = None

    def flags(self) -> Dict[str, bool]:
        return {name: getattr(self, name) for name in BOOLEAN_FIELDS}

    def confidences(self) -> Dict[str, float]:
        """Provided confidences only, keyed by axis (source, animation, face, brand)."""
        out: Dict[str, float] = {}
        for name in CONFIDENCE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                out[name[: -len("_confidence")]] = value
        return out

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON responses and cache storage."""
        d: Dict[str, Any] = self.flags()
        for name in CONFIDENCE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                d[name] = value
        return d
