"""
Unit tests for settings loading.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from certlint.config import IANA_TLDS, ICANN_GTLD_JSON, AppSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "FEEDS__GTLD_JSON_URL",
        "FEEDS__TLD_LIST_URL",
        "HTTP__CONNECT_TIMEOUT_SECONDS",
        "HTTP__READ_TIMEOUT_SECONDS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestAppSettings:
    def test_defaults(self) -> None:
        settings = AppSettings(_env_file=None)

        assert settings.feeds.gtld_json_url == ICANN_GTLD_JSON
        assert settings.feeds.tld_list_url == IANA_TLDS
        assert settings.http.connect_timeout_seconds == 15.0
        assert settings.http.read_timeout_seconds == 5.0
        assert settings.log_level == "INFO"

    def test_nested_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN FEEDS__ and HTTP__ prefixed variables
        WHEN settings load
        THEN they land on the nested models
        """
        monkeypatch.setenv("FEEDS__TLD_LIST_URL", "https://mirror.example.com/tlds.txt")
        monkeypatch.setenv("HTTP__CONNECT_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("LOG_LEVEL", " debug ")

        settings = AppSettings(_env_file=None)

        assert settings.feeds.tld_list_url == "https://mirror.example.com/tlds.txt"
        assert settings.feeds.gtld_json_url == ICANN_GTLD_JSON
        assert settings.http.timeout().connect == 2.5
        assert settings.log_level == "DEBUG"

    def test_env_file(self, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("HTTP__READ_TIMEOUT_SECONDS=9\n", encoding="utf-8")

        settings = AppSettings(_env_file=env_file)

        assert settings.http.read_timeout_seconds == 9.0

    def test_non_positive_timeout_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTP__READ_TIMEOUT_SECONDS", "0")

        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)
