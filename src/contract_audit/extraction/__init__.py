"""Text extraction for the Contract Audit System."""

from .base import DOCX_MEDIA_TYPE, PDF_MEDIA_TYPE, TextExtractor, detect_document_type
from .pdf_extractor import PDFTextExtractor
from .word_extractor import WordTextExtractor
from .exceptions import DocumentCorruptedError, ExtractionError

__all__ = [
    "DOCX_MEDIA_TYPE",
    "PDF_MEDIA_TYPE",
    "TextExtractor",
    "detect_document_type",
    "PDFTextExtractor",
    "WordTextExtractor",
    "DocumentCorruptedError",
    "ExtractionError",
]
