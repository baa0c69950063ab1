"""Text extractor interface for the Contract Audit System."""

from abc import ABC, abstractmethod


class ITextExtractor(ABC):
    """
    Abstract interface for turning an uploaded document into plain text.

    Implementations decide the document format from the declared media
    type and file name.
    """

    @abstractmethod
    def extract(self, data: bytes, media_type: str, filename: str) -> str:
        """
        Extract plain text from raw document bytes.

        Args:
            data: Raw file content.
            media_type: Declared MIME type, possibly empty.
            filename: Original file name, used as a format hint.

        Returns:
            The extracted text, possibly empty.

        Raises:
            ExtractionError: If the document cannot be read.
        """
        pass
