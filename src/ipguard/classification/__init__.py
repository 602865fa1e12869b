"""Category classification. Swap rule tables via the `rules` argument (tests, experiments)."""

from ipguard.classification.classifier import classify, match_rule
from ipguard.classification.rules import DEFAULT_RULES, Rule

__all__ = ["classify", "match_rule", "DEFAULT_RULES", "Rule"]
