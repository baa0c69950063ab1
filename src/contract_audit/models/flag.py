"""Audit flag and analysis result models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .enums import AuditFlagSeverity, AuditRule


@dataclass
class AuditFlag:
    """
    A single finding produced by a rule evaluator.

    ``start``/``end`` mirror the offsets of the sentence that triggered the
    flag (untrimmed), while ``excerpt`` is that sentence with surrounding
    whitespace removed. ``id`` is unique within one evaluation run.
    """
    id: str
    rule: AuditRule
    title: str
    message: str
    severity: AuditFlagSeverity
    start: int
    end: int
    excerpt: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert the flag to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "rule": self.rule.value,
            "title": self.title,
            "message": self.message,
            "severity": self.severity.value,
            "start": self.start,
            "end": self.end,
            "excerpt": self.excerpt,
        }


@dataclass
class AnalysisResult:
    """Outcome of running one audit rule over one document text."""
    text: str
    rule: AuditRule
    flags: List[AuditFlag] = field(default_factory=list)

    def __post_init__(self):
        if self.flags is None:
            self.flags = []

    @property
    def flag_count(self) -> int:
        return len(self.flags)

    def severity_counts(self) -> Dict[str, int]:
        """Count flags per severity; every severity is present in the result."""
        counts = {severity.value: 0 for severity in AuditFlagSeverity}
        for flag in self.flags:
            counts[flag.severity.value] += 1
        return counts

    def highest_severity(self) -> Optional[AuditFlagSeverity]:
        """Return the most severe flag level, or None when nothing was flagged."""
        if not self.flags:
            return None
        return max((f.severity for f in self.flags), key=lambda s: s.rank)
