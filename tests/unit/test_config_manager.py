"""Unit tests for audit settings loading."""

import json
import logging

import pytest

from contract_audit.config import (
    AuditSettings,
    ConfigurationError,
    configure_logging,
    load_settings,
    settings_from_env,
    validate_settings,
)
from contract_audit.config.models import DEFAULT_MAX_UPLOAD_BYTES


class TestLoadSettings:
    """Tests for loading settings from dictionaries and files."""

    def test_defaults_without_source(self):
        settings = load_settings()

        assert settings == AuditSettings()
        assert settings.max_upload_bytes == DEFAULT_MAX_UPLOAD_BYTES
        assert settings.default_rule == "liability"
        assert settings.log_level == "INFO"

    def test_load_from_dict(self):
        settings = load_settings({
            "max_upload_bytes": 1024,
            "default_rule": "gdpr",
            "log_level": "debug",
        })

        assert settings.max_upload_bytes == 1024
        assert settings.default_rule == "gdpr"
        assert settings.log_level == "DEBUG"

    def test_load_from_json_file(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps({"max_upload_bytes": 2048}), encoding="utf-8")

        settings = load_settings(config_file)

        assert settings.max_upload_bytes == 2048
        assert settings.default_rule == "liability"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_settings(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text("{broken", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_settings(config_file)

    def test_non_object_json_raises(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="JSON object"):
            load_settings(config_file)

    def test_invalid_values_collect_all_errors(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings({
                "max_upload_bytes": -1,
                "default_rule": "not-a-real-rule",
                "log_level": "LOUD",
            })

        result = exc_info.value.validation_result
        assert result is not None
        assert not result.is_valid
        assert len(result.errors) == 3

    def test_boolean_upload_limit_is_rejected(self):
        with pytest.raises(ConfigurationError):
            load_settings({"max_upload_bytes": True})


class TestValidateSettings:

    def test_unknown_keys_are_warnings(self):
        result, settings = validate_settings({"colour": "blue"})

        assert result.is_valid
        assert settings == AuditSettings()
        assert result.warnings == ["Unknown setting 'colour' ignored"]


class TestSettingsFromEnv:

    def test_empty_environment_uses_defaults(self):
        assert settings_from_env({}) == AuditSettings()

    def test_reads_prefixed_variables(self):
        settings = settings_from_env({
            "CONTRACT_AUDIT_MAX_UPLOAD_BYTES": " 4096 ",
            "CONTRACT_AUDIT_DEFAULT_RULE": "obligations",
            "CONTRACT_AUDIT_LOG_LEVEL": "warning",
        })

        assert settings.max_upload_bytes == 4096
        assert settings.default_rule == "obligations"
        assert settings.log_level == "WARNING"

    def test_non_integer_upload_limit_raises(self):
        with pytest.raises(ConfigurationError):
            settings_from_env({"CONTRACT_AUDIT_MAX_UPLOAD_BYTES": "lots"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("CONTRACT_AUDIT_DEFAULT_RULE", "gdpr")

        assert settings_from_env().default_rule == "gdpr"


def test_configure_logging_sets_package_level():
    package_logger = logging.getLogger("contract_audit")
    previous = package_logger.level
    try:
        configure_logging(AuditSettings(log_level="ERROR"))
        assert package_logger.level == logging.ERROR
    finally:
        package_logger.setLevel(previous)
