import logging

import pytest
from fastapi.testclient import TestClient

from relay.core.config import DEFAULT_RECEIVER_EMAIL, Settings, get_settings
from relay.main import app

ENV_VARS = [
    "PROJECT_NAME",
    "DEBUG",
    "LOG_LEVEL",
    "EMAIL_PROXY_HOST",
    "EMAIL_PROXY_PORT",
    "BREVO_API_KEY",
    "BREVO_API_URL",
    "BREVO_TIMEOUT_SECONDS",
    "RECEIVER_EMAIL",
    "RECEIVER_NAME",
]


@pytest.fixture(scope="function")
def clean_env(monkeypatch):
    """Fixture removing every relay variable from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsFromEnv:
    def test_defaults(self, clean_env):
        settings = Settings.from_env()

        assert settings.PROJECT_NAME == "Brevo Email Proxy"
        assert settings.DEBUG is False
        assert settings.HOST == "0.0.0.0"
        assert settings.PORT == 3001
        assert settings.BREVO_API_KEY is None
        assert settings.BREVO_API_URL == "https://api.brevo.com/v3/smtp/email"
        assert settings.BREVO_TIMEOUT_SECONDS == 10.0
        assert settings.RECEIVER_EMAIL == DEFAULT_RECEIVER_EMAIL
        assert settings.receiver_is_default

    def test_overrides(self, clean_env):
        clean_env.setenv("EMAIL_PROXY_PORT", "8080")
        clean_env.setenv("EMAIL_PROXY_HOST", "127.0.0.1")
        clean_env.setenv("BREVO_API_KEY", "xkeysib-123")
        clean_env.setenv("BREVO_TIMEOUT_SECONDS", "2.5")
        clean_env.setenv("RECEIVER_EMAIL", "owner@example.org")
        clean_env.setenv("RECEIVER_NAME", "Owner")
        clean_env.setenv("DEBUG", "True")

        settings = Settings.from_env()

        assert settings.PORT == 8080
        assert settings.HOST == "127.0.0.1"
        assert settings.BREVO_API_KEY == "xkeysib-123"
        assert settings.BREVO_TIMEOUT_SECONDS == 2.5
        assert settings.RECEIVER_EMAIL == "owner@example.org"
        assert settings.RECEIVER_NAME == "Owner"
        assert settings.DEBUG is True
        assert not settings.receiver_is_default

    def test_empty_values_fall_back(self, clean_env):
        clean_env.setenv("RECEIVER_EMAIL", "")
        clean_env.setenv("BREVO_API_KEY", "")

        settings = Settings.from_env()

        assert settings.RECEIVER_EMAIL == DEFAULT_RECEIVER_EMAIL
        assert settings.BREVO_API_KEY is None

    def test_settings_are_immutable(self):
        with pytest.raises(AttributeError):
            Settings().PORT = 9000


class TestStartupLogging:
    def test_warns_when_receiver_is_default(self, caplog):
        app.dependency_overrides[get_settings] = lambda: Settings()

        with caplog.at_level(logging.WARNING, logger="relay.main"):
            with TestClient(app):
                pass

        app.dependency_overrides.clear()

        assert "RECEIVER_EMAIL is not set" in caplog.text

    def test_no_warning_with_configured_receiver(self, caplog, mock_settings):
        app.dependency_overrides[get_settings] = lambda: mock_settings

        with caplog.at_level(logging.WARNING, logger="relay.main"):
            with TestClient(app):
                pass

        app.dependency_overrides.clear()

        assert "RECEIVER_EMAIL is not set" not in caplog.text
