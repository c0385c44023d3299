"""
Unit tests for AppConfig validation and environment overrides.
"""

import logging

import pytest

from catalog_picker.config import AppConfig, DEFAULT_BASE_URL


class TestAppConfig:

    def test_defaults(self):
        config = AppConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.display_page_size == 12
        assert config.bulk_page_size == 100
        assert config.log_level_value == logging.INFO

    @pytest.mark.parametrize("kwargs", [
        {"display_page_size": 0},
        {"bulk_page_size": -5},
        {"timeout_s": 0},
        {"connect_retries": -1},
        {"log_level": "LOUD"},
        {"base_url": "ftp://example.com"},
    ])
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            AppConfig(**kwargs)

    def test_timeout_none_allowed(self):
        assert AppConfig(timeout_s=None).timeout_s is None


class TestFromEnv:

    def test_empty_env_gives_defaults(self):
        assert AppConfig.from_env({}) == AppConfig()

    def test_reads_overrides(self):
        config = AppConfig.from_env({
            "CATALOG_PICKER_BASE_URL": "http://localhost:8000/api/",
            "CATALOG_PICKER_PAGE_SIZE": "25",
            "CATALOG_PICKER_BULK_PAGE_SIZE": "50",
            "CATALOG_PICKER_TIMEOUT": "3.5",
            "CATALOG_PICKER_CONNECT_RETRIES": "0",
            "CATALOG_PICKER_LOG_LEVEL": "debug",
        })
        assert config.base_url == "http://localhost:8000/api"
        assert config.display_page_size == 25
        assert config.bulk_page_size == 50
        assert config.timeout_s == 3.5
        assert config.connect_retries == 0
        assert config.log_level_value == logging.DEBUG

    @pytest.mark.parametrize("value", ["none", "0"])
    def test_timeout_can_be_disabled(self, value):
        assert AppConfig.from_env({"CATALOG_PICKER_TIMEOUT": value}).timeout_s is None

    def test_blank_values_ignored(self):
        assert AppConfig.from_env({"CATALOG_PICKER_PAGE_SIZE": "  "}).display_page_size == 12

    def test_non_integer_raises(self):
        with pytest.raises(ValueError, match="CATALOG_PICKER_PAGE_SIZE"):
            AppConfig.from_env({"CATALOG_PICKER_PAGE_SIZE": "twelve"})
