"""
Settings loading and logger setup.
"""
import logging

import pytest

from crowdin_api.config.constants.crowdin import DEFAULT_BASE_URL, USER_AGENT
from crowdin_api.config.settings import CrowdinSettings
from crowdin_api.utils.logger import create_logger


class TestCrowdinSettings:

    def test_defaults(self):
        settings = CrowdinSettings()
        assert settings.token == ""
        assert settings.organization is None
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout is None
        assert settings.user_agent == USER_AGENT

    def test_from_env(self, monkeypatch, faker_instance):
        token = faker_instance.sha256()
        monkeypatch.setenv("CROWDIN_TOKEN", token)
        monkeypatch.setenv("CROWDIN_ORGANIZATION", "acme")
        monkeypatch.setenv("CROWDIN_TIMEOUT", "15")
        monkeypatch.setenv("CROWDIN_REQUESTS_PER_SECOND", "20")
        monkeypatch.setenv("CROWDIN_LOG_LEVEL", "DEBUG")

        settings = CrowdinSettings.from_env()

        assert settings.token == token
        assert settings.organization == "acme"
        assert settings.timeout == 15.0
        assert settings.requests_per_second == 20.0
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_organization_is_unset(self, value):
        assert CrowdinSettings(organization=value).organization is None

    def test_to_dict_hides_token(self):
        data = CrowdinSettings(token="secret").to_dict()
        assert "token" not in data
        assert data["base_url"] == DEFAULT_BASE_URL


class TestCreateLogger:

    def test_single_handler(self, faker_instance):
        name = f"crowdin-test-{faker_instance.uuid4()}"

        first = create_logger(name, "debug")
        second = create_logger(name)

        assert first is second
        assert len(first.handlers) == 1
        assert first.level == logging.INFO

    def test_quiets_httpx(self):
        create_logger("crowdin-test-httpx")
        assert logging.getLogger("httpx").level == logging.WARNING
