"""
Notes API — Settings Tests
===========================

What we test:
    ✅ PORT defaults to 3001 and is read from the environment
    ✅ NODE_ENV drives the environment designator, ahead of APP_ENV and ENVIRONMENT
    ✅ Invalid log levels are rejected
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from notes_api.config import Settings


class TestSettings:

    def test_default_port(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert Settings(_env_file=None).port == 3001

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings(_env_file=None).port == 8080

    def test_node_env_sets_environment(self, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "production")
        app_settings = Settings(_env_file=None)

        assert app_settings.environment == "production"
        assert app_settings.is_development is False

    def test_development_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "Development")
        assert Settings(_env_file=None).is_development is True

    def test_node_env_takes_priority(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("APP_ENV", "qa")
        monkeypatch.setenv("NODE_ENV", "production")

        assert Settings(_env_file=None).environment == "production"

    def test_environment_used_without_node_env(self, monkeypatch):
        monkeypatch.delenv("NODE_ENV", raising=False)
        monkeypatch.delenv("APP_ENV", raising=False)
        monkeypatch.setenv("ENVIRONMENT", "staging")

        assert Settings(_env_file=None).environment == "staging"

    def test_static_dir_defaults_to_dist(self):
        assert Settings(_env_file=None).static_dir == "dist"

    def test_cors_origins_list(self):
        app_settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")
        assert app_settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_invalid_log_level(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="LOUD")
