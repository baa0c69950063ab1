"""Sentence segmentation with exact character offsets.

Sentences are cut with a simple heuristic: a terminator
(``.``, ``!`` or ``?``) ends a sentence when it is the last character of the
text or is followed by whitespace. Whitespace is the ECMAScript ``\\s`` set
(``WHITESPACE``), so U+FEFF counts and U+001C does not. No abbreviation
handling or other normalization is applied, so every sentence maps back onto
the original text by plain slicing.
"""

from typing import List

from ..models.document import WHITESPACE, Sentence

SENTENCE_TERMINATORS = frozenset(".!?")


def split_into_sentences(text: str) -> List[Sentence]:
    """
    Split text into consecutive, offset-addressed sentences.

    Each sentence begins where the previous one ended, so leading
    whitespace belongs to the sentence that follows it. Content left after
    the last terminator becomes a final sentence ending at ``len(text)``,
    unless it is empty or whitespace-only.

    Args:
        text: The document text to split.

    Returns:
        Sentences in document order, with ``text[s.start:s.end] == s.value``.
    """
    sentences: List[Sentence] = []
    sentence_start = 0
    length = len(text)

    for i, ch in enumerate(text):
        if ch not in SENTENCE_TERMINATORS:
            continue
        if i + 1 < length and text[i + 1] not in WHITESPACE:
            continue
        sentences.append(
            Sentence(
                value=text[sentence_start:i + 1],
                start=sentence_start,
                end=i + 1,
                index=len(sentences),
            )
        )
        sentence_start = i + 1

    trailing = text[sentence_start:]
    if trailing.strip(WHITESPACE):
        sentences.append(
            Sentence(
                value=trailing,
                start=sentence_start,
                end=length,
                index=len(sentences),
            )
        )

    return sentences


class SentenceSegmenter:
    """Injectable wrapper around :func:`split_into_sentences`."""

    def split(self, text: str) -> List[Sentence]:
        return split_into_sentences(text)
