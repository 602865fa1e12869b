"""
Ordered classification rules. First match wins; animation rules come first because
animated images are classified by source and brand only, never by face attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from entity.observation import AttributeObservation
from entity.policy import Category

Predicate = Callable[[AttributeObservation], bool]


@dataclass(frozen=True)
class Rule:
    name: str
    category: Category
    matches: Predicate


def _ai(o: AttributeObservation) -> bool:
    return o.is_ai_generated


def _human(o: AttributeObservation) -> bool:
    return not o.is_ai_generated


def _face(famous: bool, full: bool) -> Predicate:
    def check(o: AttributeObservation) -> bool:
        return (
            o.has_human_face
            and bool(o.is_famous_person) == famous
            and bool(o.is_full_face_visible) == full
        )
    return check


DEFAULT_RULES: Tuple[Rule, ...] = (
    # Animation: (source x brand) only
    Rule("ai_animation", Category.AI_ANIMATION,
         lambda o: o.is_animation and _ai(o) and not o.has_known_brand_or_character),
    Rule("ai_animation_brand", Category.AI_ANIMATION_BRAND,
         lambda o: o.is_animation and _ai(o) and o.has_known_brand_or_character),
    Rule("human_animation", Category.HUMAN_ANIMATION,
         lambda o: o.is_animation and _human(o) and not o.has_known_brand_or_character),
    Rule("human_animation_brand", Category.HUMAN_ANIMATION_BRAND,
         lambda o: o.is_animation and _human(o) and o.has_known_brand_or_character),
    # AI-generated, non-animated. Brand outranks faces.
    Rule("ai_brand", Category.AI_BRAND,
         lambda o: _ai(o) and o.has_known_brand_or_character),
    Rule("ai_plain", Category.AI_PLAIN,
         lambda o: _ai(o) and not o.has_human_face),
    Rule("ai_famous_full_face", Category.AI_FAMOUS_FULL_FACE,
         lambda o: _ai(o) and _face(True, True)(o)),
    Rule("ai_famous_partial_face", Category.AI_FAMOUS_PARTIAL_FACE,
         lambda o: _ai(o) and _face(True, False)(o)),
    Rule("ai_ordinary_full_face", Category.AI_ORDINARY_FULL_FACE,
         lambda o: _ai(o) and _face(False, True)(o)),
    Rule("ai_ordinary_partial_face", Category.AI_ORDINARY_PARTIAL_FACE,
         lambda o: _ai(o) and _face(False, False)(o)),
    # Human-generated, non-animated
    Rule("human_brand", Category.HUMAN_BRAND,
         lambda o: _human(o) and o.has_known_brand_or_character),
    Rule("human_famous_full_face", Category.HUMAN_FAMOUS_FULL_FACE,
         lambda o: _human(o) and _face(True, True)(o)),
    Rule("human_famous_partial_face", Category.HUMAN_FAMOUS_PARTIAL_FACE,
         lambda o: _human(o) and _face(True, False)(o)),
    Rule("human_ordinary_full_face", Category.HUMAN_ORDINARY_FULL_FACE,
         lambda o: _human(o) and _face(False, True)(o)),
    Rule("human_ordinary_partial_face", Category.HUMAN_ORDINARY_PARTIAL_FACE,
         lambda o: _human(o) and _face(False, False)(o)),
    # No face, no brand: same policy as the least restrictive human photo category
    Rule("human_plain", Category.HUMAN_ORDINARY_PARTIAL_FACE,
         lambda o: _human(o) and not o.has_human_face),
)
