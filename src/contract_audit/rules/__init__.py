"""Audit rules for the Contract Audit System."""

from .liability import LiabilityEvaluator, LiabilityPatternMatcher, LiabilitySignals
from .placeholders import GdprEvaluator, MissingDatesEvaluator, ObligationsEvaluator
from .registry import (
    AUDIT_RULE_OPTIONS,
    DEFAULT_RULE,
    get_evaluator,
    registered_rules,
    resolve_rule,
)

__all__ = [
    "LiabilityEvaluator",
    "LiabilityPatternMatcher",
    "LiabilitySignals",
    "MissingDatesEvaluator",
    "GdprEvaluator",
    "ObligationsEvaluator",
    "AUDIT_RULE_OPTIONS",
    "DEFAULT_RULE",
    "get_evaluator",
    "registered_rules",
    "resolve_rule",
]
