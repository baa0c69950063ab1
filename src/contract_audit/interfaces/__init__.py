"""Abstract interfaces for the Contract Audit System."""

from .evaluator import IRuleEvaluator
from .extractor import ITextExtractor

__all__ = [
    "IRuleEvaluator",
    "ITextExtractor",
]
