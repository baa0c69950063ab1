"""Settings loading for the Contract Audit System.

Settings can come from a dictionary, a JSON file, or environment variables
prefixed with ``CONTRACT_AUDIT_``.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..models.enums import AuditRule
from .models import AuditSettings, ConfigurationError, ValidationResult

ENV_PREFIX = "CONTRACT_AUDIT_"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_settings(source: Union[str, Path, Dict[str, Any], None] = None) -> AuditSettings:
    """
    Load and validate audit settings.

    Args:
        source: JSON file path, dictionary, or None for defaults.

    Returns:
        Validated AuditSettings.

    Raises:
        ConfigurationError: If the source cannot be read or fails validation.
    """
    if source is None:
        return AuditSettings()

    raw_data = _parse_source(source)
    result, settings = validate_settings(raw_data)
    if not result.is_valid or settings is None:
        raise ConfigurationError(
            "Audit settings validation failed",
            validation_result=result
        )
    return settings


def validate_settings(data: Dict[str, Any]) -> tuple[ValidationResult, Optional[AuditSettings]]:
    """Validate a settings dictionary and build AuditSettings from it."""
    result = ValidationResult(is_valid=True)
    defaults = AuditSettings()

    known_fields = {"max_upload_bytes", "default_rule", "log_level"}
    for key in data:
        if key not in known_fields:
            result.add_warning(f"Unknown setting '{key}' ignored")

    max_upload_bytes = data.get("max_upload_bytes", defaults.max_upload_bytes)
    if isinstance(max_upload_bytes, bool) or not isinstance(max_upload_bytes, int):
        result.add_error("'max_upload_bytes' must be an integer")
    elif max_upload_bytes <= 0:
        result.add_error("'max_upload_bytes' must be positive")

    default_rule = data.get("default_rule", defaults.default_rule)
    valid_rules = [rule.value for rule in AuditRule]
    if default_rule not in valid_rules:
        result.add_error(f"'default_rule' must be one of {valid_rules}")

    log_level = data.get("log_level", defaults.log_level)
    if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
        result.add_error(f"'log_level' must be one of {VALID_LOG_LEVELS}")

    if not result.is_valid:
        return result, None

    settings = AuditSettings(
        max_upload_bytes=max_upload_bytes,
        default_rule=default_rule,
        log_level=log_level.upper(),
    )
    return result, settings


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> AuditSettings:
    """
    Build settings from ``CONTRACT_AUDIT_*`` environment variables.

    Unset variables keep their defaults.

    Raises:
        ConfigurationError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ
    data: Dict[str, Any] = {}

    max_upload = env.get(f"{ENV_PREFIX}MAX_UPLOAD_BYTES")
    if max_upload is not None:
        try:
            data["max_upload_bytes"] = int(max_upload.strip())
        except ValueError:
            result = ValidationResult(is_valid=True)
            result.add_error(f"{ENV_PREFIX}MAX_UPLOAD_BYTES must be an integer")
            raise ConfigurationError("Invalid environment settings", validation_result=result)

    default_rule = env.get(f"{ENV_PREFIX}DEFAULT_RULE")
    if default_rule is not None:
        data["default_rule"] = default_rule.strip()

    log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
    if log_level is not None:
        data["log_level"] = log_level.strip()

    return load_settings(data)


def configure_logging(settings: AuditSettings) -> None:
    """Apply the configured log level to the package logger."""
    logging.getLogger("contract_audit").setLevel(settings.log_level)


def _parse_source(source: Union[str, Path, Dict[str, Any]]) -> Dict[str, Any]:
    """Read a settings source into a dictionary."""
    if isinstance(source, dict):
        return source

    path = Path(source)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in configuration file: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must contain a JSON object")
    return data
