"""Tests for settings and failure helpers."""

import pytest

from roster_console.config import Settings, get_settings
from roster_console.errors import (
    ConsoleError,
    NotFoundFailure,
    TransportFailure,
    ValidationFailure,
    failure_message,
)
from roster_console.services import StudentService


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for environment driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("API_BASE_URL", raising=False)
        monkeypatch.delenv("DEFAULT_PAGE_SIZE", raising=False)
        monkeypatch.delenv("HTTP_RETRY_ATTEMPTS", raising=False)
        settings = Settings(_env_file=None)

        assert settings.api_base_url == "http://localhost:8080"
        assert settings.default_page_size == 10
        assert settings.http_retry_attempts == 3

    def test_reads_environment(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("API_BASE_URL", "https://console.example.edu/api/")
        monkeypatch.setenv("HTTP_RETRY_ATTEMPTS", "5")

        service = StudentService()

        assert service.url == "https://console.example.edu/api/students"
        assert service.retry_attempts == 5


class TestFailureMessage:
    """Tests for failure_message."""

    def test_uses_failure_message(self):
        assert failure_message(ValidationFailure("Name is required"), "Failed") == "Name is required"

    @pytest.mark.parametrize(
        "error",
        [TransportFailure(), NotFoundFailure(None, 404), ValidationFailure("  "), RuntimeError("boom")],
    )
    def test_falls_back_to_default(self, error):
        assert failure_message(error, "Failed to load students") == "Failed to load students"

    def test_taxonomy_shares_base(self):
        for failure in (TransportFailure, ValidationFailure, NotFoundFailure):
            assert issubclass(failure, ConsoleError)
