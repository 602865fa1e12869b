"""Policy lookup (Category -> Policy) and the licensing-recommendation view."""

from ipguard.policy.licensing import (
    RECOMMENDATIONS,
    licensing_code,
    licensing_recommendation,
    licensing_view,
)
from ipguard.policy.table import (
    MANUAL_REMIX_LICENSE,
    POLICY_TABLE,
    SELFIE_REMIX_LICENSE,
    get_policy,
    policy_with_verification,
    requires_selfie,
)

__all__ = [
    "RECOMMENDATIONS",
    "licensing_code",
    "licensing_recommendation",
    "licensing_view",
    "MANUAL_REMIX_LICENSE",
    "POLICY_TABLE",
    "SELFIE_REMIX_LICENSE",
    "get_policy",
    "policy_with_verification",
    "requires_selfie",
]
