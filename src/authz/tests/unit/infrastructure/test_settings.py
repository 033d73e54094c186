"""Unit tests for infrastructure settings."""

import json

import pytest
from pydantic import ValidationError

from infrastructure.settings import LoggingSettings, PolicySettings


class TestPolicySettings:
    """Tests for resource-to-policy map configuration."""

    def test_defaults_to_empty_map(self, monkeypatch):
        monkeypatch.delenv("AUTHZ_POLICY_RESOURCE_POLICIES", raising=False)
        settings = PolicySettings(_env_file=None)
        assert settings.resource_policies == {}

    def test_reads_json_map_from_environment(self, monkeypatch):
        """The map should be parsed from a JSON object."""
        policies = {"app.models.Article": "app.policies.ArticlePolicy"}
        monkeypatch.setenv("AUTHZ_POLICY_RESOURCE_POLICIES", json.dumps(policies))

        settings = PolicySettings(_env_file=None)

        assert settings.resource_policies == policies

    def test_accepts_map_via_constructor(self):
        settings = PolicySettings(
            resource_policies={"app.models.Comment": "app.policies.CommentPolicy"}
        )
        assert settings.resource_policies["app.models.Comment"] == (
            "app.policies.CommentPolicy"
        )

    def test_rejects_non_string_values(self):
        with pytest.raises(ValidationError):
            PolicySettings(resource_policies={"app.models.Article": ["a", "b"]})


class TestLoggingSettings:
    """Tests for logging configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("AUTHZ_LOG_LEVEL", raising=False)
        monkeypatch.delenv("AUTHZ_LOG_JSON_OUTPUT", raising=False)

        settings = LoggingSettings(_env_file=None)

        assert settings.level == "INFO"
        assert settings.json_output is None

    def test_level_is_normalized(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_unknown_level_is_rejected(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="verbose")

    def test_reads_from_environment(self, monkeypatch):
        monkeypatch.setenv("AUTHZ_LOG_LEVEL", "warning")
        monkeypatch.setenv("AUTHZ_LOG_JSON_OUTPUT", "true")

        settings = LoggingSettings(_env_file=None)

        assert settings.level == "WARNING"
        assert settings.json_output is True
