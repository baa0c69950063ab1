"""Audit engine for the Contract Audit System.

This module wires rule resolution and rule evaluation together: a caller
hands over document text plus a rule selector and receives the flags the
selected evaluator produced.
"""

import logging
import time
from typing import Dict, Optional

from .interfaces.evaluator import IRuleEvaluator
from .models.enums import AuditRule
from .models.flag import AnalysisResult
from .rules.registry import get_evaluator, registered_rules, resolve_rule


logger = logging.getLogger(__name__)


class AuditEngine:
    """
    Runs one audit rule over one document text.

    The engine keeps no per-document state; the same input always produces
    the same result. Evaluators can be overridden per rule, e.g. to plug in
    a different implementation behind the same interface.
    """

    def __init__(self, evaluators: Optional[Dict[AuditRule, IRuleEvaluator]] = None):
        """
        Initialize the audit engine.

        Args:
            evaluators: Optional per-rule overrides of the registered evaluators.
        """
        self._evaluators: Dict[AuditRule, IRuleEvaluator] = {
            rule: get_evaluator(rule) for rule in registered_rules()
        }
        if evaluators:
            self._evaluators.update(evaluators)

    def analyze(self, text: str, rule: Optional[str] = None) -> AnalysisResult:
        """
        Analyze text against the selected rule.

        Args:
            text: Plain document text. Empty or whitespace-only text yields
                no flags.
            rule: Rule id or label; unknown values fall back to liability.

        Returns:
            AnalysisResult with flags ordered by start offset.
        """
        audit_rule = resolve_rule(rule)
        start_time = time.time()
        logger.info(f"Starting {audit_rule.value} analysis on {len(text)} characters")

        flags = self._evaluators[audit_rule].evaluate(text)
        flags = sorted(flags, key=lambda f: f.start)

        result = AnalysisResult(text=text, rule=audit_rule, flags=flags)
        elapsed = time.time() - start_time
        highest = result.highest_severity()
        logger.info(
            f"Finished {audit_rule.value} analysis: {result.flag_count} flags "
            f"(highest: {highest.value if highest else 'none'}) in {elapsed:.3f}s"
        )
        return result


def analyze_text(text: str, rule: Optional[str] = AuditRule.LIABILITY.value) -> AnalysisResult:
    """Analyze text with a fresh AuditEngine."""
    return AuditEngine().analyze(text, rule)
