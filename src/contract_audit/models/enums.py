"""Enumerations for the Contract Audit System."""

from enum import Enum


class DocumentType(Enum):
    """Document format types accepted for text extraction."""
    WORD = "docx"
    PDF = "pdf"
    TEXT = "txt"


class AuditRule(Enum):
    """Audit rules a document can be checked against."""
    LIABILITY = "liability"
    MISSING_DATES = "missing-dates"
    GDPR = "gdpr"
    OBLIGATIONS = "obligations"

    @property
    def label(self) -> str:
        """Human-readable label shown when selecting a rule."""
        return _RULE_LABELS[self]


_RULE_LABELS = {
    AuditRule.LIABILITY: "Identify High-Risk Liability Clauses",
    AuditRule.MISSING_DATES: "Find Missing Dates/Deadlines",
    AuditRule.GDPR: "GDPR Compliance Check",
    AuditRule.OBLIGATIONS: "Summarize Key Obligations",
}


class AuditFlagSeverity(Enum):
    """Relative risk of a flag, lowest first."""
    INFO = "info"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Display ordering: info < medium < high."""
        return _SEVERITY_RANKS[self]


_SEVERITY_RANKS = {
    AuditFlagSeverity.INFO: 0,
    AuditFlagSeverity.MEDIUM: 1,
    AuditFlagSeverity.HIGH: 2,
}
