"""Categories, policy records and routing results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Tuple

from entity.observation import AttributeObservation


class Category(IntEnum):
    """Closed set of classifier outcomes. 0 is the coverage-bug sentinel, never a policy."""
    UNCLASSIFIED = 0
    AI_PLAIN = 1
    AI_BRAND = 2
    AI_FAMOUS_FULL_FACE = 3
    AI_FAMOUS_PARTIAL_FACE = 4
    AI_ORDINARY_FULL_FACE = 5
    AI_ORDINARY_PARTIAL_FACE = 6
    HUMAN_BRAND = 7
    HUMAN_FAMOUS_FULL_FACE = 8
    HUMAN_FAMOUS_PARTIAL_FACE = 9
    HUMAN_ORDINARY_FULL_FACE = 10
    HUMAN_ORDINARY_PARTIAL_FACE = 11
    AI_ANIMATION = 12
    AI_ANIMATION_BRAND = 13
    HUMAN_ANIMATION = 14
    HUMAN_ANIMATION_BRAND = 15


class RequiredAction(str, Enum):
    NONE = "None"
    SUBMIT_REVIEW = "SubmitReview"
    SELFIE_VERIFICATION = "SelfieVerification"


class AiTrainingPermission(str, Enum):
    DENIED = "Denied"
    ALLOWED_MANUAL = "AllowedManual"
    DENIED_FIXED = "Denied_Fixed"


@dataclass(frozen=True)
class Policy:
    """Registration / licensing / AI-training decision attached to a Category."""
    registration_allowed: bool
    required_action: RequiredAction
    licensing_template: Optional[str]
    ai_training_permission: AiTrainingPermission

    def to_dict(self) -> Dict[str, Any]:
        return {
            "registration_allowed": self.registration_allowed,
            "required_action": self.required_action.value,
            "licensing_template": self.licensing_template,
            "ai_training_permission": self.ai_training_permission.value,
        }


@dataclass(frozen=True)
class RoutingResult:
    """
    One routing decision. Lives for a single request; carries the observation it was
    derived from so handlers can echo the normalized flags back to the client.
    """
    category: Category
    policy: Policy
    observation: AttributeObservation
    ambiguity_warning: bool = False
    low_confidence_fields: Tuple[str, ...] = field(default_factory=tuple)
    selfie_verified: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "category": int(self.category),
            "category_name": self.category.name,
            "policy": self.policy.to_dict(),
            "ambiguity_warning": self.ambiguity_warning,
            "low_confidence_fields": list(self.low_confidence_fields),
            "details": self.observation.to_dict(),
        }
        if self.selfie_verified is not None:
            d["selfie_verified"] = self.selfie_verified
        return d
