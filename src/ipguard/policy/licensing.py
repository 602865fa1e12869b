"""
Licensing recommendations as a view over Category. Each category is projected onto the
(source, animation, face type, brand) axes and resolved with brand/famous first, then
ordinary faces, then neither.

When the routed observation is passed in, its face state refines the projection: a plain
human image (no face, no brand) shares category 11 with ordinary partial faces for policy
purposes but keeps its own recommendation (code 4).

Animation categories always project to face type "None", because classification ignores
faces once an image is animated. An AI animation showing a famous face therefore gets
code 7, not code 8, and codes 9 and 12 (animation with an ordinary face) are never
produced. Keep it that way: the projection must agree with the category decision.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple, Optional

from entity.observation import AttributeObservation
from entity.policy import Category

RECOMMENDATIONS: Mapping[int, str] = MappingProxyType({
    1: "Free Use License",
    2: "Creative Commons - Attribution (CC BY)",
    3: "Creative Commons - Non-Commercial (CC BY-NC)",
    4: "Creative Commons - No Derivatives (CC BY-ND)",
    5: "Creative Commons - ShareAlike (CC BY-SA)",
    6: "License for Editorial Use Only",
    7: "License with Brand Review Required",
    8: "Special License - Contact Owner",
    9: "Royalty-Free Image, Attribution Required",
    10: "Public Domain",
    11: "License for Internal/Research Only",
    12: "Not for Commercial Use",
})

# (ai, animation) -> code, per face/brand tier
_PROTECTED = {(True, True): 8, (True, False): 2, (False, True): 11, (False, False): 5}
_ORDINARY = {(True, True): 9, (True, False): 3, (False, True): 12, (False, False): 6}
_PLAIN = {(True, True): 7, (True, False): 1, (False, True): 10, (False, False): 4}


class Projection(NamedTuple):
    is_ai: bool
    is_animation: bool
    face_type: str  # "None" | "Ordinary" | "Famous"
    has_brand: bool


_PROJECTIONS: Dict[Category, Projection] = {
    Category.AI_PLAIN: Projection(True, False, "None", False),
    Category.AI_BRAND: Projection(True, False, "None", True),
    Category.AI_FAMOUS_FULL_FACE: Projection(True, False, "Famous", False),
    Category.AI_FAMOUS_PARTIAL_FACE: Projection(True, False, "Famous", False),
    Category.AI_ORDINARY_FULL_FACE: Projection(True, False, "Ordinary", False),
    Category.AI_ORDINARY_PARTIAL_FACE: Projection(True, False, "Ordinary", False),
    Category.HUMAN_BRAND: Projection(False, False, "None", True),
    Category.HUMAN_FAMOUS_FULL_FACE: Projection(False, False, "Famous", False),
    Category.HUMAN_FAMOUS_PARTIAL_FACE: Projection(False, False, "Famous", False),
    Category.HUMAN_ORDINARY_FULL_FACE: Projection(False, False, "Ordinary", False),
    Category.HUMAN_ORDINARY_PARTIAL_FACE: Projection(False, False, "Ordinary", False),
    Category.AI_ANIMATION: Projection(True, True, "None", False),
    Category.AI_ANIMATION_BRAND: Projection(True, True, "None", True),
    Category.HUMAN_ANIMATION: Projection(False, True, "None", False),
    Category.HUMAN_ANIMATION_BRAND: Projection(False, True, "None", True),
}


def project(category: Category | int, observation: Optional[AttributeObservation] = None) -> Projection:
    try:
        p = _PROJECTIONS[Category(category)]
    except (ValueError, KeyError):
        raise KeyError(f"No licensing projection for category {category!r}") from None
    if observation is not None and not p.is_animation and not observation.has_human_face:
        p = p._replace(face_type="None")
    return p


def licensing_code(category: Category | int, observation: Optional[AttributeObservation] = None) -> int:
    """Recommendation code 1..12 for a category, refined by the observation when given."""
    p = project(category, observation)
    key = (p.is_ai, p.is_animation)
    if p.has_brand or p.face_type == "Famous":
        return _PROTECTED[key]
    if p.face_type == "Ordinary":
        return _ORDINARY[key]
    return _PLAIN[key]


def licensing_recommendation(category: Category | int, observation: Optional[AttributeObservation] = None) -> str:
    return RECOMMENDATIONS[licensing_code(category, observation)]


def licensing_view(
    category: Category | int,
    observation: Optional[AttributeObservation] = None,
) -> Dict[str, object]:
    """Serializable {code, recommendation} block for responses."""
    code = licensing_code(category, observation)
    return {"code": code, "recommendation": RECOMMENDATIONS[code]}
