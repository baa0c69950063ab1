"""Unit tests for liability clause detection.

Covers keyword detection, the unlimited/cap predicates, the severity
priority chain, titles and messages, and offset bookkeeping.
"""

from contract_audit.models.enums import AuditFlagSeverity, AuditRule
from contract_audit.rules.liability import (
    GENERIC_MESSAGE,
    GENERIC_TITLE,
    LIABILITY_KEYWORDS,
    UNCAPPED_MESSAGE,
    UNLIMITED_TITLE,
    LiabilityEvaluator,
    LiabilityPatternMatcher,
)


def _evaluate(text):
    return LiabilityEvaluator().evaluate(text)


class TestSeverityClassification:
    """Severity, title and message per sentence."""

    def test_unlimited_liability_is_high(self):
        flags = _evaluate("Vendor's liability under this agreement is unlimited.")

        assert len(flags) == 1
        assert flags[0].severity == AuditFlagSeverity.HIGH
        assert flags[0].title == UNLIMITED_TITLE
        assert flags[0].title == "Potentially unlimited liability"
        assert flags[0].message == UNCAPPED_MESSAGE

    def test_cap_on_liability_is_info(self):
        flags = _evaluate("There is a cap on liability of $10,000.")

        assert len(flags) == 1
        assert flags[0].severity == AuditFlagSeverity.INFO
        assert flags[0].title == GENERIC_TITLE
        assert flags[0].message == GENERIC_MESSAGE

    def test_plain_liability_mention_is_medium(self):
        flags = _evaluate("The parties agree to standard liability terms.")

        assert len(flags) == 1
        assert flags[0].severity == AuditFlagSeverity.MEDIUM
        assert flags[0].title == "Liability / indemnity clause detected"
        assert flags[0].message == GENERIC_MESSAGE

    def test_sentence_without_keywords_is_not_flagged(self):
        assert _evaluate("The weather today is sunny.") == []

    def test_unlimited_and_cap_together_stay_medium(self):
        flags = _evaluate(
            "Liability for data loss is unlimited, but all other liability "
            "shall not exceed the fees paid."
        )

        assert len(flags) == 1
        assert flags[0].severity == AuditFlagSeverity.MEDIUM
        assert flags[0].title == UNLIMITED_TITLE
        assert flags[0].message == GENERIC_MESSAGE

    def test_without_limitation_counts_as_unlimited(self):
        flags = _evaluate("The Supplier shall indemnify the Customer without limitation.")

        assert flags[0].severity == AuditFlagSeverity.HIGH

    def test_no_cap_counts_as_unlimited(self):
        flags = _evaluate("There is no cap on the indemnification amount.")

        assert flags[0].severity == AuditFlagSeverity.HIGH
        assert flags[0].title == UNLIMITED_TITLE

    def test_liability_limited_to_is_info(self):
        flags = _evaluate("Each party's liability is limited to the fees paid.")

        assert flags[0].severity == AuditFlagSeverity.INFO

    def test_cap_wildcard_spans_newline_inside_sentence(self):
        flags = _evaluate("The liability of the Supplier\nshall not exceed the fees paid.")

        assert len(flags) == 1
        assert flags[0].severity == AuditFlagSeverity.INFO

    def test_cap_wildcard_does_not_cross_sentences(self):
        flags = _evaluate("Liability applies. Fees shall not exceed $100.")

        assert len(flags) == 1
        assert flags[0].severity == AuditFlagSeverity.MEDIUM
        assert flags[0].excerpt == "Liability applies."

    def test_keywords_are_case_insensitive(self):
        flags = _evaluate("THE CUSTOMER SHALL HOLD HARMLESS THE VENDOR.")

        assert len(flags) == 1
        assert flags[0].severity == AuditFlagSeverity.MEDIUM

    def test_unlimited_keyword_alone_is_high(self):
        flags = _evaluate("Customer receives unlimited seats.")

        assert flags[0].severity == AuditFlagSeverity.HIGH


class TestFlagOffsets:
    """Ids, offsets and excerpts map back onto the source text."""

    TEXT = (
        "This Agreement starts today. The Supplier shall indemnify the Customer. "
        "Payment is due monthly.\n\n  Neither party is liable for consequential damages.  "
    )

    def test_flags_reference_triggering_sentences(self):
        flags = _evaluate(self.TEXT)

        assert [f.id for f in flags] == ["1", "3"]
        assert self.TEXT[flags[0].start:flags[0].end] == " The Supplier shall indemnify the Customer."
        assert flags[0].excerpt == "The Supplier shall indemnify the Customer."
        assert flags[1].excerpt == "Neither party is liable for consequential damages."

    def test_excerpt_is_trimmed_slice(self):
        for flag in _evaluate(self.TEXT):
            assert self.TEXT[flag.start:flag.end].strip() == flag.excerpt
            assert flag.rule == AuditRule.LIABILITY

    def test_flags_are_ordered_by_start(self):
        starts = [f.start for f in _evaluate(self.TEXT)]
        assert starts == sorted(starts)

    def test_evaluation_is_deterministic(self):
        assert _evaluate(self.TEXT) == _evaluate(self.TEXT)

    def test_empty_text_yields_no_flags(self):
        assert _evaluate("") == []


class TestLiabilityPatternMatcher:
    """Direct checks of the predicates."""

    def test_default_keyword_table(self):
        matcher = LiabilityPatternMatcher()
        text = " ".join(LIABILITY_KEYWORDS)

        assert matcher.find_keywords(text) == LIABILITY_KEYWORDS

    def test_match_returns_none_without_keywords(self):
        assert LiabilityPatternMatcher().match("Payment is due in 30 days.") is None

    def test_match_reports_keyword_hits(self):
        signals = LiabilityPatternMatcher().match(
            "Indemnification covers indirect damages."
        )

        assert signals is not None
        assert signals.keywords == ["indemnification", "indirect damages"]
        assert signals.has_unlimited is False
        assert signals.has_cap is False

    def test_custom_keywords(self):
        matcher = LiabilityPatternMatcher(keywords=["warranty"])

        assert matcher.match("The warranty lasts one year.") is not None
        assert matcher.match("Liability is excluded.") is None
