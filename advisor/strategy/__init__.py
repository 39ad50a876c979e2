"""Strategy tables and deviations."""

from advisor.strategy.rules import BASELINE_RULES, Capabilities, RuleSet
from advisor.strategy.basic import Action, BasicStrategy, resolve_baseline
from advisor.strategy.deviations import (
    INDEX_PLAYS,
    DeviationResult,
    IndexPlay,
    InsuranceAdvice,
    insurance_advice,
    resolve_deviation,
)

__all__ = [
    "BASELINE_RULES",
    "Capabilities",
    "RuleSet",
    "Action",
    "BasicStrategy",
    "resolve_baseline",
    "INDEX_PLAYS",
    "DeviationResult",
    "IndexPlay",
    "InsuranceAdvice",
    "insurance_advice",
    "resolve_deviation",
]
