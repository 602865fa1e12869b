"""
ipguard: deterministic image classification -> IP registration / licensing policy router.

Subpackages:
  validation      - total normalization of untrusted attribute input
  classification  - ordered rule table, Observation -> Category
  policy          - Category -> Policy table, selfie transition, licensing view
  decision        - DecisionRouter (entry point) with confidence ambiguity flags
  extractors      - vision-model attribute extraction (LangChain)
  cache           - content-hash observation caches
"""

from entity import AttributeObservation, Category, Policy, RoutingResult
from ipguard.classification import classify
from ipguard.decision import DecisionRouter, route
from ipguard.errors import (
    ImageTooLargeError,
    InvalidInputError,
    RouterError,
    UnclassifiedError,
    VisionParseError,
)
from ipguard.policy import get_policy, licensing_view, policy_with_verification
from ipguard.validation import normalize_boolean, normalize_observation

__all__ = [
    "AttributeObservation",
    "Category",
    "Policy",
    "RoutingResult",
    "classify",
    "DecisionRouter",
    "route",
    "ImageTooLargeError",
    "InvalidInputError",
    "RouterError",
    "UnclassifiedError",
    "VisionParseError",
    "get_policy",
    "licensing_view",
    "policy_with_verification",
    "normalize_boolean",
    "normalize_observation",
]
