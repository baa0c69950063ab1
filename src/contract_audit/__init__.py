"""
Contract Audit System

Deterministic detection of high-risk contract clauses with exact character
offsets back into the source text.
"""

__version__ = "0.1.0"

# Export main components
from .analysis import AuditEngine, analyze_text
from .models.enums import AuditFlagSeverity, AuditRule, DocumentType
from .models.document import Sentence
from .models.flag import AnalysisResult, AuditFlag
from .interfaces.evaluator import IRuleEvaluator
from .interfaces.extractor import ITextExtractor
from .segmentation import SentenceSegmenter, split_into_sentences
from .rules import (
    AUDIT_RULE_OPTIONS,
    GdprEvaluator,
    LiabilityEvaluator,
    MissingDatesEvaluator,
    ObligationsEvaluator,
    get_evaluator,
    resolve_rule,
)
from .serialization import ResultSerializer, result_to_payload
from .config import (
    AuditSettings,
    ConfigurationError,
    ValidationResult,
    load_settings,
    settings_from_env,
)

__all__ = [
    "AuditEngine",
    "analyze_text",
    "AuditFlagSeverity",
    "AuditRule",
    "DocumentType",
    "Sentence",
    "AnalysisResult",
    "AuditFlag",
    "IRuleEvaluator",
    "ITextExtractor",
    "SentenceSegmenter",
    "split_into_sentences",
    "AUDIT_RULE_OPTIONS",
    "GdprEvaluator",
    "LiabilityEvaluator",
    "MissingDatesEvaluator",
    "ObligationsEvaluator",
    "get_evaluator",
    "resolve_rule",
    "ResultSerializer",
    "result_to_payload",
    "AuditSettings",
    "ConfigurationError",
    "ValidationResult",
    "load_settings",
    "settings_from_env",
]
