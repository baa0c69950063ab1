"""Liability clause detection.

Flags every sentence that mentions liability or indemnity and classifies
it by whether the wording suggests uncapped exposure or an explicit cap.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from ..interfaces.evaluator import IRuleEvaluator
from ..models.document import Sentence
from ..models.enums import AuditFlagSeverity, AuditRule
from ..models.flag import AuditFlag
from ..segmentation.segmenter import SentenceSegmenter

LIABILITY_KEYWORDS = [
    "liability",
    "indemnify",
    "indemnification",
    "hold harmless",
    "consequential damages",
    "indirect damages",
    "unlimited",
    "cap on liability",
]

UNLIMITED_TITLE = "Potentially unlimited liability"
GENERIC_TITLE = "Liability / indemnity clause detected"

UNCAPPED_MESSAGE = (
    "This clause appears to expose your side to broad or uncapped liability. "
    "A Senior Legal Ops Manager would typically push for a clear monetary cap "
    "and exclusions for indirect or consequential losses."
)
GENERIC_MESSAGE = (
    "This clause allocates liability or indemnity obligations. Review the cap, "
    "carve-outs, and scope of indemnity to ensure they align with your risk "
    "appetite."
)


@dataclass
class LiabilitySignals:
    """Signals found in a single lower-cased sentence."""
    keywords: List[str]
    has_unlimited: bool
    has_cap: bool

    @property
    def is_uncapped(self) -> bool:
        return self.has_unlimited and not self.has_cap

    @property
    def severity(self) -> AuditFlagSeverity:
        severity = AuditFlagSeverity.MEDIUM
        if self.has_unlimited and not self.has_cap:
            severity = AuditFlagSeverity.HIGH
        elif self.has_cap and not self.has_unlimited:
            severity = AuditFlagSeverity.INFO
        return severity

    @property
    def title(self) -> str:
        return UNLIMITED_TITLE if self.has_unlimited else GENERIC_TITLE

    @property
    def message(self) -> str:
        return UNCAPPED_MESSAGE if self.is_uncapped else GENERIC_MESSAGE


class LiabilityPatternMatcher:
    """
    Keyword and regex matcher for liability wording.

    Works on lower-cased sentence text. The cap pattern's wildcard may span
    newlines inside a sentence, but never crosses a sentence boundary since
    it only ever sees one sentence.
    """

    UNLIMITED_PATTERNS = [
        re.compile(r"without\s+limit"),
        re.compile(r"no\s+cap"),
    ]

    CAP_PATTERNS = [
        re.compile(r"cap on liability"),
        re.compile(r"liability.*(shall not exceed|is limited to)", re.DOTALL),
    ]

    def __init__(self, keywords: Optional[List[str]] = None):
        self._keywords = list(keywords) if keywords is not None else list(LIABILITY_KEYWORDS)

    def find_keywords(self, text_lower: str) -> List[str]:
        """Return the keywords contained in the text, in table order."""
        return [k for k in self._keywords if k in text_lower]

    def has_unlimited(self, text_lower: str) -> bool:
        if "unlimited" in text_lower:
            return True
        return any(p.search(text_lower) for p in self.UNLIMITED_PATTERNS)

    def has_cap(self, text_lower: str) -> bool:
        return any(p.search(text_lower) for p in self.CAP_PATTERNS)

    def match(self, text: str) -> Optional[LiabilitySignals]:
        """
        Inspect one sentence.

        Args:
            text: Sentence text in its original casing.

        Returns:
            LiabilitySignals when at least one keyword is present, else None.
        """
        text_lower = text.lower()
        hits = self.find_keywords(text_lower)
        if not hits:
            return None
        return LiabilitySignals(
            keywords=hits,
            has_unlimited=self.has_unlimited(text_lower),
            has_cap=self.has_cap(text_lower),
        )


class LiabilityEvaluator(IRuleEvaluator):
    """Emits one flag per sentence containing liability or indemnity wording."""

    rule = AuditRule.LIABILITY

    def __init__(
        self,
        segmenter: Optional[SentenceSegmenter] = None,
        matcher: Optional[LiabilityPatternMatcher] = None,
    ):
        self._segmenter = segmenter or SentenceSegmenter()
        self._matcher = matcher or LiabilityPatternMatcher()

    def evaluate(self, text: str) -> List[AuditFlag]:
        flags: List[AuditFlag] = []
        for sentence in self._segmenter.split(text):
            signals = self._matcher.match(sentence.value)
            if signals is None:
                continue
            flags.append(self._build_flag(sentence, signals))
        return flags

    def _build_flag(self, sentence: Sentence, signals: LiabilitySignals) -> AuditFlag:
        return AuditFlag(
            id=str(sentence.index),
            rule=self.rule,
            title=signals.title,
            message=signals.message,
            severity=signals.severity,
            start=sentence.start,
            end=sentence.end,
            excerpt=sentence.stripped,
        )
