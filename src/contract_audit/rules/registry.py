"""Rule registry: resolves rule selectors and maps rules to evaluators."""

import logging
from typing import Dict, List, Optional, Type

from ..interfaces.evaluator import IRuleEvaluator
from ..models.enums import AuditRule
from .liability import LiabilityEvaluator
from .placeholders import GdprEvaluator, MissingDatesEvaluator, ObligationsEvaluator


logger = logging.getLogger(__name__)

DEFAULT_RULE = AuditRule.LIABILITY

AUDIT_RULE_OPTIONS: List[Dict[str, str]] = [
    {"id": rule.value, "label": rule.label} for rule in AuditRule
]

_EVALUATORS: Dict[AuditRule, Type[IRuleEvaluator]] = {
    AuditRule.LIABILITY: LiabilityEvaluator,
    AuditRule.MISSING_DATES: MissingDatesEvaluator,
    AuditRule.GDPR: GdprEvaluator,
    AuditRule.OBLIGATIONS: ObligationsEvaluator,
}


def resolve_rule(identifier: Optional[str]) -> AuditRule:
    """
    Resolve a caller-supplied selector to an AuditRule.

    Matches exactly against either the rule id or its display label.
    Anything else falls back to the liability rule; this is never an error.

    Args:
        identifier: Rule id, rule label, or arbitrary string.

    Returns:
        The matching AuditRule, or DEFAULT_RULE.
    """
    for rule in AuditRule:
        if identifier == rule.value or identifier == rule.label:
            return rule
    logger.warning(f"Unknown audit rule {identifier!r}, falling back to {DEFAULT_RULE.value}")
    return DEFAULT_RULE


def get_evaluator(rule: AuditRule) -> IRuleEvaluator:
    """Create the evaluator registered for a rule."""
    return _EVALUATORS[rule]()


def registered_rules() -> List[AuditRule]:
    """Rules that have an evaluator, in registration order."""
    return list(_EVALUATORS)
