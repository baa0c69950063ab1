"""Data models and enums for the Contract Audit System."""

from .enums import AuditFlagSeverity, AuditRule, DocumentType
from .document import Sentence
from .flag import AnalysisResult, AuditFlag

__all__ = [
    # Enums
    "AuditFlagSeverity",
    "AuditRule",
    "DocumentType",
    # Text models
    "Sentence",
    # Result models
    "AuditFlag",
    "AnalysisResult",
]
