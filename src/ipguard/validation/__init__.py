"""
Observation validation: total normalization of untrusted attribute input.
Malformed fields never raise; only a non-mapping input does (InvalidInputError).
"""

from ipguard.validation._common import (
    FIELD_ALIASES,
    normalize_boolean,
    normalize_confidence,
)
from ipguard.validation.observation import (
    enforce_consistency,
    is_licensing_payload,
    normalize_observation,
    observation_from_licensing_input,
)

__all__ = [
    "FIELD_ALIASES",
    "normalize_boolean",
    "normalize_confidence",
    "enforce_consistency",
    "is_licensing_payload",
    "normalize_observation",
    "observation_from_licensing_input",
]
