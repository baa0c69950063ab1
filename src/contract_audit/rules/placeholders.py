"""Evaluators for rules that do not produce findings yet.

They keep every AuditRule selectable through the same interface. A real
implementation replaces ``evaluate`` without touching any caller.
"""

from typing import List

from ..interfaces.evaluator import IRuleEvaluator
from ..models.enums import AuditRule
from ..models.flag import AuditFlag


class _NoFindingsEvaluator(IRuleEvaluator):

    def evaluate(self, text: str) -> List[AuditFlag]:
        return []


class MissingDatesEvaluator(_NoFindingsEvaluator):
    """Missing dates and deadlines."""
    rule = AuditRule.MISSING_DATES


class GdprEvaluator(_NoFindingsEvaluator):
    """GDPR compliance gaps."""
    rule = AuditRule.GDPR


class ObligationsEvaluator(_NoFindingsEvaluator):
    """Key obligations summary."""
    rule = AuditRule.OBLIGATIONS
