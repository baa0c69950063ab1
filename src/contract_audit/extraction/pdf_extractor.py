"""PDF text extraction."""

import io

import pdfplumber
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from .exceptions import DocumentCorruptedError, ExtractionError


class PDFTextExtractor:
    """
    Extracts plain text from PDF bytes.

    PyPDF2 validates the file first; pdfplumber then does the layout-aware
    text extraction. Pages are joined with a blank line.
    """

    def extract(self, data: bytes, filename: str = "document.pdf") -> str:
        """
        Extract the text of every page.

        Raises:
            DocumentCorruptedError: If the PDF is corrupted or encrypted.
            ExtractionError: If the content cannot be read.
        """
        try:
            reader = PdfReader(io.BytesIO(data))
            page_count = len(reader.pages)
        except PdfReadError as e:
            raise DocumentCorruptedError(
                message="PDF file is corrupted or encrypted",
                filename=filename,
                location="file header",
                details={"original_error": str(e)}
            )
        except Exception as e:
            raise ExtractionError(
                message=f"Failed to open PDF: {str(e)}",
                filename=filename,
                details={"original_error": str(e)}
            )

        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                return self._extract_pages(pdf)
        except Exception as e:
            raise ExtractionError(
                message=f"Failed to read PDF content: {str(e)}",
                filename=filename,
                details={"original_error": str(e), "page_count": page_count}
            )

    def _extract_pages(self, pdf: pdfplumber.PDF) -> str:
        text_parts = []
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
        return "\n\n".join(text_parts)
