"""Decision routing: normalize -> classify -> policy, with confidence-based ambiguity flags."""

from ipguard.decision.router import (
    CONFIDENCE_AXES,
    DEFAULT_CONFIDENCE_THRESHOLD,
    DecisionRouter,
    get_router,
    resolve_thresholds,
    route,
)

__all__ = [
    "CONFIDENCE_AXES",
    "DEFAULT_CONFIDENCE_THRESHOLD",
    "DecisionRouter",
    "get_router",
    "resolve_thresholds",
    "route",
]
