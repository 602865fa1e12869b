"""Shared normalization helpers: loose booleans, confidences, field-name aliases."""

from __future__ import annotations

import math
from typing import Any, Mapping

TRUE_STRINGS = frozenset({"true", "yes", "ya", "1"})

# Accepted spellings per canonical field. LLM output uses snake_case, JS clients camelCase.
FIELD_ALIASES = {
    "is_ai_generated": ("is_ai_generated", "isAiGenerated"),
    "is_animation": ("is_animation", "isAnimation"),
    "has_human_face": ("has_human_face", "hasHumanFace"),
    "is_full_face_visible": ("is_full_face_visible", "isFullFaceVisible"),
    "is_famous_person": ("is_famous_person", "isFamousPerson"),
    "has_known_brand_or_character": (
        "has_known_brand_or_character",
        "hasKnownBrandOrCharacter",
        "hasBrand",
        "has_brand",
    ),
    "source_confidence": ("source_confidence", "sourceConfidence", "conf_source"),
    "animation_confidence": ("animation_confidence", "animationConfidence", "conf_animation"),
    "face_confidence": ("face_confidence", "faceConfidence", "conf_face"),
    "brand_confidence": ("brand_confidence", "brandConfidence", "conf_brand"),
    "source": ("source",),
    "face_type": ("face_type", "faceType"),
}


def normalize_boolean(value: Any) -> bool:
    """
    Total: True for True, non-zero numbers and "true"/"yes"/"ya"/"1" (any case, trimmed);
    False for everything else, including None and unparseable strings. Never raises.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        # NaN compares unequal to 0 but carries no signal
        return not math.isnan(value) and value != 0
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return False


def normalize_confidence(value: Any) -> float | None:
    """Parse a confidence into [0, 1]; None when absent or unparseable. Out-of-range values are clamped."""
    if value is None or isinstance(value, bool):
        return None
    try:
        f = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(f):
        return None
    return max(0.0, min(1.0, f))


def pick_field(raw: Mapping[str, Any], canonical: str) -> Any:
    """Return the first present alias for a canonical field, or None."""
    for key in FIELD_ALIASES.get(canonical, (canonical,)):
        if key in raw:
            return raw[key]
    return None
