# Tests for environment-driven settings.

import pytest
from pydantic import ValidationError

from chat_proxy.config.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("OPENAI_API_KEY", "FETCH_TIMEOUT", "OPENAI_MAX_RETRIES", "OPENAI_RETRY_BASE_DELAY"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.openai_api_key == ""
        assert settings.openai_configured is False
        assert settings.fetch_timeout == 10000
        assert settings.openai_max_retries == 2
        assert settings.openai_retry_base_delay == 1000

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("FETCH_TIMEOUT", "2500")
        monkeypatch.setenv("OPENAI_MAX_RETRIES", "4")

        settings = Settings(_env_file=None)

        assert settings.openai_api_key == "sk-env"
        assert settings.fetch_timeout == 2500
        assert settings.openai_max_retries == 4

    def test_frozen(self, settings):
        with pytest.raises(ValidationError):
            settings.openai_api_key = "changed"

    def test_rejects_negative_retries(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, openai_api_key="sk-test", openai_max_retries=-1)
