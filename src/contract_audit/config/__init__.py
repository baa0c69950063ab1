"""Configuration management for the Contract Audit System."""

from .config_manager import (
    configure_logging,
    load_settings,
    settings_from_env,
    validate_settings,
)
from .models import (
    AuditSettings,
    ConfigurationError,
    ValidationResult,
)

__all__ = [
    "configure_logging",
    "load_settings",
    "settings_from_env",
    "validate_settings",
    "AuditSettings",
    "ConfigurationError",
    "ValidationResult",
]
