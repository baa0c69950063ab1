"""Custom exceptions for text extraction."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ExtractionError(Exception):
    """
    Base exception for text extraction errors.

    Carries enough context for server-side logging. None of it is meant to
    be shown to the uploader.

    Attributes:
        message: Human-readable error description.
        filename: Name of the uploaded file.
        location: Where in the file the problem was found (header, page, ...).
        details: Additional error details.
    """
    message: str
    filename: Optional[str] = None
    location: Optional[str] = None
    details: Optional[dict] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [self.message]
        if self.filename:
            parts.append(f"File: {self.filename}")
        if self.location:
            parts.append(f"Location: {self.location}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "filename": self.filename,
            "location": self.location,
            "details": self.details,
        }


@dataclass
class DocumentCorruptedError(ExtractionError):
    """
    Raised when a PDF or Word document cannot be opened.

    Covers corrupted, truncated, encrypted, or mislabelled files.
    """

    def get_recovery_suggestions(self) -> list[str]:
        """Return suggestions for recovering from this error."""
        suggestions = [
            "Try opening the file in its native application to verify it's not corrupted",
            "Check if the file is password-protected or encrypted",
        ]
        if self.filename and self.filename.lower().endswith(".pdf"):
            suggestions.append("Scanned PDFs need OCR before their text can be audited")
        elif self.filename and self.filename.lower().endswith(".docx"):
            suggestions.append("Try re-saving the document as .docx from Word")
        return suggestions
