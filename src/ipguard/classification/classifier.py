"""Category classifier: AttributeObservation -> Category via the ordered rule table."""

from __future__ import annotations

from typing import Iterable, Optional

from entity.observation import AttributeObservation
from entity.policy import Category
from ipguard.classification.rules import DEFAULT_RULES, Rule


def match_rule(
    observation: AttributeObservation,
    rules: Optional[Iterable[Rule]] = None,
) -> Optional[Rule]:
    """Return the first matching rule, or None when the table has no coverage."""
    for rule in DEFAULT_RULES if rules is None else rules:
        if rule.matches(observation):
            return rule
    return None


def classify(
    observation: AttributeObservation,
    rules: Optional[Iterable[Rule]] = None,
) -> Category:
    """
    Map one observation to exactly one Category. Pure: the same observation always
    yields the same category. Returns Category.UNCLASSIFIED when nothing matches;
    the router turns that into UnclassifiedError.
    """
    rule = match_rule(observation, rules)
    return rule.category if rule else Category.UNCLASSIFIED
