"""Decision router: raw attributes -> normalized observation -> category -> policy."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from commons.config import config as default_config
from commons.config import get_section
from commons.constants import Constants as Co
from commons.logging_utils import get_logger

from entity.observation import AttributeObservation
from entity.policy import Category, RoutingResult
from ipguard.classification import Rule, classify
from ipguard.errors import UnclassifiedError
from ipguard.policy import get_policy, policy_with_verification
from ipguard.validation import (
    is_licensing_payload,
    normalize_observation,
    observation_from_licensing_input,
)

logger = get_logger(__name__)

CONFIDENCE_AXES = ("source", "animation", "face", "brand")
DEFAULT_CONFIDENCE_THRESHOLD = 0.5


def resolve_thresholds(
    cfg: Optional[Dict[str, Any]] = None,
    overrides: Optional[Mapping[str, float]] = None,
) -> Mapping[str, float]:
    """Per-axis thresholds: explicit overrides, then router.confidence_thresholds, then 0.5."""
    section = get_section(cfg, Co.ROUTER, Co.CONFIDENCE_THRESHOLDS)
    overrides = overrides or {}
    unknown = set(overrides) - set(CONFIDENCE_AXES)
    if unknown:
        raise ValueError(f"Unknown confidence axes: {sorted(unknown)}; expected {CONFIDENCE_AXES}")
    out: Dict[str, float] = {}
    for axis in CONFIDENCE_AXES:
        value = overrides.get(axis, section.get(axis, DEFAULT_CONFIDENCE_THRESHOLD))
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"Confidence threshold for {axis!r} must be a number, got {value!r}") from None
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Confidence threshold for {axis!r} must be within [0, 1], got {value}")
        out[axis] = value
    return MappingProxyType(out)


class DecisionRouter:
    """
    Stateless after construction: thresholds and rules are read-only, so one instance
    can serve concurrent requests.
    """

    def __init__(
        self,
        thresholds: Optional[Mapping[str, float]] = None,
        cfg: Optional[Dict[str, Any]] = None,
        rules: Optional[Iterable[Rule]] = None,
    ):
        self.thresholds = resolve_thresholds(default_config if cfg is None else cfg, thresholds)
        self.rules = tuple(rules) if rules is not None else None

    def observe(self, raw: Any) -> AttributeObservation:
        """Normalize either input shape (flat attribute flags or licensing-router payload)."""
        if is_licensing_payload(raw):
            return observation_from_licensing_input(raw)
        return normalize_observation(raw)

    def low_confidence_fields(self, observation: AttributeObservation) -> tuple[str, ...]:
        """Axes whose provided confidence is below threshold. Absent confidences never flag."""
        return tuple(
            axis
            for axis, value in observation.confidences().items()
            if value < self.thresholds[axis]
        )

    def classify(self, observation: AttributeObservation) -> Category:
        category = classify(observation, self.rules)
        if category is Category.UNCLASSIFIED:
            logger.error("Decision table coverage defect: no rule matched %s", observation.to_dict())
            raise UnclassifiedError(observation)
        return category

    def route(self, raw: Any, selfie_verified: Optional[bool] = None) -> RoutingResult:
        """
        Route one raw observation. selfie_verified is only consulted for categories whose
        base action is SelfieVerification. Raises InvalidInputError for non-mapping input
        and UnclassifiedError on a coverage defect; malformed fields never raise.
        """
        observation = self.observe(raw)
        category = self.classify(observation)
        if selfie_verified is None:
            policy = get_policy(category)
        else:
            policy = policy_with_verification(category, bool(selfie_verified))
        low = self.low_confidence_fields(observation)
        if low:
            logger.info("Category %d is advisory only; low confidence on %s", int(category), ", ".join(low))
        return RoutingResult(
            category=category,
            policy=policy,
            observation=observation,
            ambiguity_warning=bool(low),
            low_confidence_fields=low,
            selfie_verified=selfie_verified,
        )


_default_router: Optional[DecisionRouter] = None


def get_router() -> DecisionRouter:
    """Shared router built from the loaded config."""
    global _default_router
    if _default_router is None:
        _default_router = DecisionRouter()
    return _default_router


def route(raw: Any, selfie_verified: Optional[bool] = None) -> RoutingResult:
    """Route with the shared, config-driven router."""
    return get_router().route(raw, selfie_verified=selfie_verified)
