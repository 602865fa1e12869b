"""Shared entities: attribute observation, categories, policies, vision schemas."""

from entity.observation import AttributeObservation, BOOLEAN_FIELDS, CONFIDENCE_FIELDS
from entity.policy import (
    AiTrainingPermission,
    Category,
    Policy,
    RequiredAction,
    RoutingResult,
)
from entity.vision_schema import LicensingRouterInput, VisionAnalysis

__all__ = [
    "AttributeObservation",
    "BOOLEAN_FIELDS",
    "CONFIDENCE_FIELDS",
    "AiTrainingPermission",
    "Category",
    "Policy",
    "RequiredAction",
    "RoutingResult",
    "LicensingRouterInput",
    "VisionAnalysis",
]
