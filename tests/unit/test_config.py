"""Unit tests for settings checks."""

import pytest

from quill.config import AuthSettings, Settings, check_settings
from quill.util.error import ConfigurationError


class TestCheckSettings:
    """Tests for check_settings."""

    @pytest.mark.parametrize("environment", ["staging", "production"])
    def test_default_secret_rejected_when_deployed(self, environment):
        settings = Settings(environment=environment, auth=AuthSettings())

        with pytest.raises(ConfigurationError):
            check_settings(settings)

    def test_default_secret_allowed_in_development(self):
        check_settings(Settings(environment="development", auth=AuthSettings()))

    def test_custom_secret_allowed_in_production(self):
        settings = Settings(
            environment="production", auth=AuthSettings(jwt_secret="s3cret")
        )

        check_settings(settings)


class TestFrontendUrl:
    """Tests for the CORS origin computed from settings."""

    def test_development_uses_vite_port(self):
        settings = Settings(environment="development", frontend_host="localhost")

        assert settings.api.frontend_url == "http://localhost:5173"

    def test_production_uses_https(self):
        settings = Settings(
            environment="production",
            frontend_host="quill.blog",
            auth=AuthSettings(jwt_secret="s3cret"),
        )

        assert settings.api.frontend_url == "https://quill.blog"
