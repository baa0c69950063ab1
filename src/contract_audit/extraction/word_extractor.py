"""Word document (.docx) text extraction."""

import io
from zipfile import BadZipFile

from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from .exceptions import DocumentCorruptedError, ExtractionError


class WordTextExtractor:
    """Extracts raw paragraph text from .docx bytes, one paragraph per line."""

    def extract(self, data: bytes, filename: str = "document.docx") -> str:
        """
        Extract paragraph and table text.

        Raises:
            DocumentCorruptedError: If the bytes are not a valid Word file.
            ExtractionError: If the document cannot be opened.
        """
        try:
            doc = Document(io.BytesIO(data))
        except (BadZipFile, PackageNotFoundError, KeyError) as e:
            raise DocumentCorruptedError(
                message="Document is corrupted or not a valid Word file",
                filename=filename,
                location="file header",
                details={"original_error": str(e)}
            )
        except Exception as e:
            raise ExtractionError(
                message=f"Failed to open document: {str(e)}",
                filename=filename,
                details={"original_error": str(e)}
            )

        lines = [para.text for para in doc.paragraphs]
        for table in doc.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    lines.append(" | ".join(cells))
        return "\n".join(lines)
