"""
Test suite for configuration loading.
"""

import pytest
from pydantic import ValidationError

from matomo_client import config as config_module
from matomo_client.config import MatomoConfig, ResponseFormat, get_config, set_config


class TestMatomoConfig:
    """Tests for MatomoConfig."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MATOMO_URL", "https://analytics.example.org")
        monkeypatch.setenv("MATOMO_AUTH_TOKEN", "abc")
        monkeypatch.setenv("MATOMO_DEFAULT_SITE_ID", "3")
        monkeypatch.setenv("MATOMO_SECURITY_MODE", "false")

        config = MatomoConfig(_env_file=None)

        assert config.url == "https://analytics.example.org"
        assert config.auth_token == "abc"
        assert config.default_site_id == 3
        assert config.security_mode is False

    def test_defaults(self, monkeypatch):
        for name in ("MATOMO_URL", "MATOMO_AUTH_TOKEN", "MATOMO_DEFAULT_SITE_ID", "MATOMO_FORMAT"):
            monkeypatch.delenv(name, raising=False)

        config = MatomoConfig(_env_file=None)

        assert config.url is None
        assert config.format == ResponseFormat.JSON
        assert config.security_mode is True
        assert config.timeout_seconds == 30.0

    def test_api_endpoint_strips_trailing_slash(self):
        config = MatomoConfig(_env_file=None, url="https://matomo.example.com/")

        assert config.base_url == "https://matomo.example.com"
        assert config.api_endpoint == "https://matomo.example.com/index.php"

    def test_format_from_string(self):
        assert MatomoConfig(_env_file=None, format="xml").format == ResponseFormat.XML

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            MatomoConfig(_env_file=None, timeout_seconds=0)

    def test_global_config(self, monkeypatch):
        monkeypatch.setattr(config_module, "_config", None)
        config = MatomoConfig(_env_file=None, url="https://global.example.com")
        set_config(config)

        assert get_config() is config
