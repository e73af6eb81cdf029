"""Unit tests for AdapterSettings."""

import pytest
from pydantic import ValidationError

from methodapi.runtime.config import MAX_PAYLOAD_SIZE
from methodapi.runtime.settings import AdapterSettings


class TestAdapterSettings:
    """Tests for defaults and environment loading."""

    def test_defaults(self, clean_env):
        settings = AdapterSettings.from_env()

        assert settings.max_body_size == MAX_PAYLOAD_SIZE
        assert settings.request_timeout is None
        assert settings.run_sync_in_threadpool is True

    def test_from_env(self, clean_env):
        clean_env.setenv("METHODAPI_MAX_BODY_SIZE", "1024")
        clean_env.setenv("METHODAPI_REQUEST_TIMEOUT", "2.5")
        clean_env.setenv("METHODAPI_SYNC_IN_THREADPOOL", "false")

        settings = AdapterSettings.from_env()

        assert settings.max_body_size == 1024
        assert settings.request_timeout == 2.5
        assert settings.run_sync_in_threadpool is False

    def test_blank_values_use_defaults(self, clean_env):
        clean_env.setenv("METHODAPI_MAX_BODY_SIZE", "  ")

        assert AdapterSettings.from_env().max_body_size == MAX_PAYLOAD_SIZE

    def test_invalid_value(self, clean_env):
        clean_env.setenv("METHODAPI_MAX_BODY_SIZE", "lots")

        with pytest.raises(ValidationError):
            AdapterSettings.from_env()

    def test_frozen(self):
        settings = AdapterSettings()

        with pytest.raises(ValidationError):
            settings.max_body_size = 1
