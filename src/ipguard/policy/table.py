"""Static Category -> Policy table, plus the selfie-verification transition."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from entity.policy import AiTrainingPermission, Category, Policy, RequiredAction

MANUAL_REMIX_LICENSE = "Commercial Remix License (manual minting fee and revenue share)"
SELFIE_REMIX_LICENSE = "Commercial Remix License (upon successful selfie)"

_ALLOWED = RequiredAction.NONE
_REVIEW = RequiredAction.SUBMIT_REVIEW
_SELFIE = RequiredAction.SELFIE_VERIFICATION
_FIXED = AiTrainingPermission.DENIED_FIXED
_MANUAL = AiTrainingPermission.ALLOWED_MANUAL
_DENIED = AiTrainingPermission.DENIED


def _allowed(training: AiTrainingPermission) -> Policy:
    return Policy(True, _ALLOWED, MANUAL_REMIX_LICENSE, training)


def _review() -> Policy:
    # No AI-training setting applies until a reviewer clears the asset
    return Policy(False, _REVIEW, None, _DENIED)


def _selfie(training: AiTrainingPermission) -> Policy:
    return Policy(False, _SELFIE, SELFIE_REMIX_LICENSE, training)


POLICY_TABLE: Mapping[Category, Policy] = MappingProxyType({
    Category.AI_PLAIN: _allowed(_FIXED),
    Category.AI_BRAND: _review(),
    Category.AI_FAMOUS_FULL_FACE: _selfie(_FIXED),
    Category.AI_FAMOUS_PARTIAL_FACE: _allowed(_FIXED),
    Category.AI_ORDINARY_FULL_FACE: _review(),
    Category.AI_ORDINARY_PARTIAL_FACE: _selfie(_FIXED),
    Category.HUMAN_BRAND: _review(),
    Category.HUMAN_FAMOUS_FULL_FACE: _review(),
    Category.HUMAN_FAMOUS_PARTIAL_FACE: _allowed(_MANUAL),
    Category.HUMAN_ORDINARY_FULL_FACE: _selfie(_MANUAL),
    Category.HUMAN_ORDINARY_PARTIAL_FACE: _allowed(_MANUAL),
    Category.AI_ANIMATION: _allowed(_FIXED),
    Category.AI_ANIMATION_BRAND: _review(),
    Category.HUMAN_ANIMATION: _allowed(_MANUAL),
    Category.HUMAN_ANIMATION_BRAND: _review(),
})


def _lookup(category: Category | int) -> tuple[Category, Policy]:
    try:
        key = Category(category)
        return key, POLICY_TABLE[key]
    except (ValueError, KeyError):
        raise KeyError(f"No policy for category {category!r}") from None


def get_policy(category: Category | int) -> Policy:
    """Base policy for a category. KeyError for UNCLASSIFIED or unknown codes."""
    return _lookup(category)[1]


def requires_selfie(category: Category | int) -> bool:
    return get_policy(category).required_action is RequiredAction.SELFIE_VERIFICATION


def policy_with_verification(category: Category | int, selfie_verified: bool) -> Policy:
    """
    Policy after the selfie step. Only SelfieVerification categories change: a verified
    selfie allows registration and clears the action; AI-training keeps the category's
    base setting. Every other category returns its base policy unchanged.
    """
    key, base = _lookup(category)
    if base.required_action is not RequiredAction.SELFIE_VERIFICATION or not selfie_verified:
        return base
    return _VERIFIED_TABLE[key]


_VERIFIED_TABLE: Mapping[Category, Policy] = MappingProxyType({
    category: Policy(True, RequiredAction.NONE, policy.licensing_template, policy.ai_training_permission)
    for category, policy in POLICY_TABLE.items()
    if policy.required_action is RequiredAction.SELFIE_VERIFICATION
})
