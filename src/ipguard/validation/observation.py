"""Turn loosely-typed external input into a strict AttributeObservation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from entity.observation import BOOLEAN_FIELDS, CONFIDENCE_FIELDS, AttributeObservation
from entity.vision_schema import LicensingRouterInput
from ipguard.errors import InvalidInputError
from ipguard.validation._common import (
    FIELD_ALIASES,
    normalize_boolean,
    normalize_confidence,
    pick_field,
)


def enforce_consistency(observation: AttributeObservation) -> AttributeObservation:
    """A full face can only be visible when a face is present."""
    if observation.is_full_face_visible and not observation.has_human_face:
        return replace(observation, is_full_face_visible=False)
    return observation


def normalize_observation(raw: Any) -> AttributeObservation:
    """
    Normalize a raw mapping (LLM JSON, request body, or an existing observation).
    Missing or malformed fields become False / None. Raises InvalidInputError only
    when raw is not a mapping at all.
    """
    if isinstance(raw, AttributeObservation):
        return enforce_consistency(raw)
    if not isinstance(raw, Mapping):
        raise InvalidInputError(
            f"Observation must be a mapping, got {type(raw).__name__}", raw
        )
    values: dict[str, Any] = {}
    for name in BOOLEAN_FIELDS:
        values[name] = normalize_boolean(pick_field(raw, name))
    for name in CONFIDENCE_FIELDS:
        values[name] = normalize_confidence(pick_field(raw, name))
    return enforce_consistency(AttributeObservation(**values))


LICENSING_SOURCES = ("AI", "Human")
FACE_TYPES = ("None", "Ordinary", "Famous")

# Keys only the flat attribute shape carries; their presence rules out the tri-state payload
_FLAT_ONLY_FIELDS = ("is_ai_generated", "has_human_face", "is_full_face_visible", "is_famous_person")


def is_licensing_payload(raw: Any) -> bool:
    """
    True when raw uses the tri-state licensing-router shape: source is exactly "AI" or
    "Human" and none of the flat attribute keys are present.
    """
    if isinstance(raw, LicensingRouterInput):
        return True
    if not isinstance(raw, Mapping) or raw.get("source") not in LICENSING_SOURCES:
        return False
    return not any(key in raw for name in _FLAT_ONLY_FIELDS for key in FIELD_ALIASES[name])


def normalize_face_type(value: Any) -> str:
    """Case-insensitive match on None / Ordinary / Famous; anything else is "None"."""
    if isinstance(value, str):
        wanted = value.strip().lower()
        for face_type in FACE_TYPES:
            if face_type.lower() == wanted:
                return face_type
    return "None"


def _licensing_input(raw: Mapping) -> LicensingRouterInput:
    source = pick_field(raw, "source")
    return LicensingRouterInput(
        source="AI" if isinstance(source, str) and source.strip().lower() == "ai" else "Human",
        is_animation=normalize_boolean(pick_field(raw, "is_animation")),
        face_type=normalize_face_type(pick_field(raw, "face_type")),
        has_brand=normalize_boolean(pick_field(raw, "has_known_brand_or_character")),
        conf_source=normalize_confidence(pick_field(raw, "source_confidence")),
        conf_animation=normalize_confidence(pick_field(raw, "animation_confidence")),
        conf_face=normalize_confidence(pick_field(raw, "face_confidence")),
        conf_brand=normalize_confidence(pick_field(raw, "brand_confidence")),
    )


def observation_from_licensing_input(raw: Any) -> AttributeObservation:
    """
    Convert a licensing-router payload {source, isAnimation, faceType, hasBrand, conf_*}.
    Fields get the same total normalization as the flat shape: loose booleans are parsed,
    missing flags are False, an unknown faceType is "None" and any source other than "AI"
    is human. Famous -> face present and famous; full-face visibility is not asserted.
    """
    if isinstance(raw, LicensingRouterInput):
        payload = raw
    elif isinstance(raw, Mapping):
        payload = _licensing_input(raw)
    else:
        raise InvalidInputError(
            f"Licensing payload must be a mapping, got {type(raw).__name__}", raw
        )

    has_face = payload.face_type != "None"
    return enforce_consistency(AttributeObservation(
        is_ai_generated=payload.source == "AI",
        is_animation=payload.is_animation,
        has_human_face=has_face,
        is_full_face_visible=False,
        is_famous_person=payload.face_type == "Famous",
        has_known_brand_or_character=payload.has_brand,
        source_confidence=normalize_confidence(payload.conf_source),
        animation_confidence=normalize_confidence(payload.conf_animation),
        face_confidence=normalize_confidence(payload.conf_face),
        brand_confidence=normalize_confidence(payload.conf_brand),
    ))
