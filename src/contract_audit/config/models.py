"""Data models for configuration management."""

from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_MAX_UPLOAD_BYTES = 20 * 1024 * 1024


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result


@dataclass
class AuditSettings:
    """
    Runtime settings for the audit service.

    ``default_rule`` is used when a request carries no rule selector at all;
    unrecognized selectors still resolve to the liability rule.
    """
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    default_rule: str = "liability"
    log_level: str = "INFO"
