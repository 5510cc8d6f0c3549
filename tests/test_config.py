from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import AppSettings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = AppSettings()
    assert settings.prompt_suffix == ": "
    assert settings.date_pattern == "yyyy-MM-dd"
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INPUT_HELPER_DATE_PATTERN", "%d.%m.%Y")
    monkeypatch.setenv("INPUT_HELPER_LOG_LEVEL", "debug")
    settings = AppSettings()
    assert settings.date_pattern == "%d.%m.%Y"
    assert settings.log_level == "DEBUG"


def test_dotenv_file_is_read(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("INPUT_HELPER_DATE_DISPLAY=DD.MM.YYYY\n", encoding="utf-8")
    assert AppSettings().date_display == "DD.MM.YYYY"


def test_unknown_log_level(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INPUT_HELPER_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        AppSettings()


def test_date_format_from_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INPUT_HELPER_DATE_PATTERN", "dd/MM/yyyy")
    monkeypatch.setenv("INPUT_HELPER_DATE_DISPLAY", "DD/MM/YYYY")
    fmt = AppSettings().date_format
    assert fmt.parse_pattern == "dd/MM/yyyy"
    assert fmt.display_pattern == "DD/MM/YYYY"
