"""Environment-driven settings and filter criteria."""
import json

import pytest

import bot_config
from bot_config import (
    ALLOWED_LOCATIONS,
    ROLE_KEYWORDS,
    configured_timeout,
    configured_worksheet_index,
    load_filters,
    sheet_settings,
)
from job_models import ConfigError, JobBotError, SheetConnectionError


def test_defaults_without_filters_file():
    F = load_filters()
    assert F["include_keywords"] == ROLE_KEYWORDS
    assert F["locations_any"] == ALLOWED_LOCATIONS


def test_filters_file_overrides_one_key(tmp_path):
    path = tmp_path / "filters.json"
    path.write_text(json.dumps({"locations_any": ["Seattle"], "include_keywords": []}))
    F = load_filters(str(path))
    assert F["locations_any"] == ["Seattle"]
    assert F["include_keywords"] == ROLE_KEYWORDS


def test_unreadable_filters_file_falls_back(tmp_path):
    path = tmp_path / "filters.json"
    path.write_text("[not valid")
    assert load_filters(str(path))["locations_any"] == ALLOWED_LOCATIONS


def test_sheet_settings_explicit(service_account_file):
    assert sheet_settings("abc", service_account_file) == ("abc", service_account_file)


def test_sheet_settings_from_module(monkeypatch, service_account_file):
    monkeypatch.setattr(bot_config, "SPREADSHEET_ID", "from-env")
    monkeypatch.setattr(bot_config, "SERVICE_ACCOUNT_FILE", service_account_file)
    assert sheet_settings() == ("from-env", service_account_file)


def test_sheet_settings_missing(monkeypatch):
    monkeypatch.setattr(bot_config, "SPREADSHEET_ID", "")
    with pytest.raises(SheetConnectionError):
        sheet_settings()
    with pytest.raises(SheetConnectionError):
        sheet_settings("abc", "")


def test_sheet_settings_missing_credentials_file(tmp_path):
    with pytest.raises(SheetConnectionError) as exc:
        sheet_settings("abc", str(tmp_path / "missing.json"))
    assert "missing.json" in str(exc.value)


def test_numeric_settings_parse_at_call_time(monkeypatch):
    monkeypatch.setattr(bot_config, "WORKSHEET_INDEX", "2")
    monkeypatch.setattr(bot_config, "HTTP_TIMEOUT", "7.5")
    assert configured_worksheet_index() == 2
    assert configured_timeout() == 7.5


@pytest.mark.parametrize("raw", ["first", "1.5", ""])
def test_bad_worksheet_index(monkeypatch, raw):
    monkeypatch.setattr(bot_config, "WORKSHEET_INDEX", raw)
    with pytest.raises(JobBotError):
        configured_worksheet_index()


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_bad_timeout(monkeypatch, raw):
    monkeypatch.setattr(bot_config, "HTTP_TIMEOUT", raw)
    with pytest.raises(ConfigError):
        configured_timeout()
