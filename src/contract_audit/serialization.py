"""JSON encoding of analysis results."""

from typing import Any, Dict

from .models.flag import AnalysisResult


class ResultSerializer:
    """
    Converts analysis results to the JSON response payload.

    The payload shape is ``{"text", "rule", "flags", "severity_counts"}``.
    """

    @staticmethod
    def to_payload(result: AnalysisResult) -> Dict[str, Any]:
        """Build the response dictionary for an analysis result."""
        return {
            "text": result.text,
            "rule": result.rule.value,
            "flags": [flag.to_dict() for flag in result.flags],
            "severity_counts": result.severity_counts(),
        }


def result_to_payload(result: AnalysisResult) -> Dict[str, Any]:
    """Convenience function for ResultSerializer.to_payload."""
    return ResultSerializer.to_payload(result)
