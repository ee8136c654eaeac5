"""Tests for environment configuration loading."""

import logging

import pytest

from bitmex.env_config import configure_logging
from bitmex.env_config import load_config_from_env
from bitmex.env_config import load_credential_from_env
from bitmex.models import PRODUCTION_URL
from bitmex.models import TESTNET_URL

ENV_VARS = [
    "BITMEX_API_KEY",
    "BITMEX_API_SECRET",
    "BITMEX_TESTNET",
    "BITMEX_BASE_URL",
    "BITMEX_TIMEOUT",
    "BITMEX_USER_AGENT",
    "BITMEX_SIGN_WITH_REQUEST_VERB",
    "BITMEX_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from an environment without BITMEX_* variables."""
    for name in ENV_VARS:
        # setenv first so values written by load_dotenv are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestLoadConfig:
    """Test HTTPConfig loading."""

    def test_defaults(self):
        config = load_config_from_env(use_dotenv=False)
        assert config.api_url == PRODUCTION_URL
        assert config.timeout is None
        assert config.sign_with_request_verb is False

    def test_values(self, monkeypatch):
        monkeypatch.setenv("BITMEX_TESTNET", "yes")
        monkeypatch.setenv("BITMEX_TIMEOUT", "2.5")
        monkeypatch.setenv("BITMEX_USER_AGENT", "bot/0.1")
        monkeypatch.setenv("BITMEX_SIGN_WITH_REQUEST_VERB", "1")

        config = load_config_from_env(use_dotenv=False)

        assert config.api_url == TESTNET_URL
        assert config.timeout == 2.5
        assert config.user_agent == "bot/0.1"
        assert config.sign_with_request_verb is True

    def test_base_url_override(self, monkeypatch):
        monkeypatch.setenv("BITMEX_BASE_URL", "http://localhost:9000/api/v1/")
        assert load_config_from_env(use_dotenv=False).api_url == "http://localhost:9000/api/v1"

    def test_invalid_timeout_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("BITMEX_TIMEOUT", "soon")
        with caplog.at_level(logging.WARNING, logger="bitmex.env_config"):
            config = load_config_from_env(use_dotenv=False)
        assert config.timeout is None
        assert "Invalid timeout value" in caplog.text

    def test_dotenv_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("BITMEX_TESTNET=true\n")
        config = load_config_from_env(str(env_file))
        assert config.api_url == TESTNET_URL

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("BITMEX_LOG_LEVEL", "debug")
        logger = logging.getLogger("bitmex")
        previous = logger.level
        try:
            load_config_from_env(use_dotenv=False)
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)


class TestLoadCredential:
    """Test credential loading."""

    def test_missing(self):
        assert load_credential_from_env(use_dotenv=False) is None

    def test_present(self, monkeypatch):
        monkeypatch.setenv("BITMEX_API_KEY", "key")
        monkeypatch.setenv("BITMEX_API_SECRET", "secret")
        credential = load_credential_from_env(use_dotenv=False)
        assert credential.key == "key"
        assert credential.secret == "secret"

    def test_half_configured(self, monkeypatch, caplog):
        monkeypatch.setenv("BITMEX_API_KEY", "key")
        with caplog.at_level(logging.WARNING, logger="bitmex.env_config"):
            assert load_credential_from_env(use_dotenv=False) is None
        assert "ignoring both" in caplog.text


def test_configure_logging_rejects_unknown_level(caplog):
    with caplog.at_level(logging.WARNING, logger="bitmex.env_config"):
        configure_logging("chatty")
    assert "Invalid log level" in caplog.text
