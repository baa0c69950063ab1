"""Text-level data models for the Contract Audit System."""

from dataclasses import dataclass

# Characters treated as whitespace at sentence boundaries and when trimming
# excerpts: the ECMAScript ``\s`` set. Unlike ``str.isspace`` it includes
# U+FEFF and excludes the information separators U+001C..U+001F and U+0085.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


@dataclass(frozen=True)
class Sentence:
    """
    Sentence unit cut from a document's text.

    ``start`` and ``end`` are offsets into the original text, so
    ``text[start:end] == value`` holds exactly, trailing punctuation and
    whitespace included. ``index`` is the zero-based position of the
    sentence in the document.
    """
    value: str
    start: int
    end: int
    index: int

    @property
    def stripped(self) -> str:
        return self.value.strip(WHITESPACE)
