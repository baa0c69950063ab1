"""Sentence segmentation for the Contract Audit System."""

from .segmenter import SENTENCE_TERMINATORS, SentenceSegmenter, split_into_sentences

__all__ = ["SENTENCE_TERMINATORS", "SentenceSegmenter", "split_into_sentences"]
