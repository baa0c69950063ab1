"""Format-dispatching text extractor."""

import logging

from ..interfaces.extractor import ITextExtractor
from ..models.enums import DocumentType
from .pdf_extractor import PDFTextExtractor
from .word_extractor import WordTextExtractor


logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def detect_document_type(media_type: str, filename: str) -> DocumentType:
    """
    Decide the document format from the declared media type and file name.

    Either signal is sufficient; anything unrecognized is treated as text.
    """
    lower_name = (filename or "").lower()
    media_type = media_type or ""

    if media_type == PDF_MEDIA_TYPE or lower_name.endswith(".pdf"):
        return DocumentType.PDF
    if media_type == DOCX_MEDIA_TYPE or lower_name.endswith(".docx"):
        return DocumentType.WORD
    return DocumentType.TEXT


class TextExtractor(ITextExtractor):
    """
    Main text extractor that delegates to format-specific extractors.

    Unknown formats are decoded as UTF-8, with undecodable bytes replaced.
    """

    def __init__(self):
        self._pdf_extractor = PDFTextExtractor()
        self._word_extractor = WordTextExtractor()

    def extract(self, data: bytes, media_type: str = "", filename: str = "document") -> str:
        doc_type = detect_document_type(media_type, filename)
        logger.debug(f"Extracting {doc_type.value} text from {filename} ({len(data)} bytes)")

        if doc_type == DocumentType.PDF:
            return self._pdf_extractor.extract(data, filename)
        if doc_type == DocumentType.WORD:
            return self._word_extractor.extract(data, filename)
        return data.decode("utf-8", errors="replace")
