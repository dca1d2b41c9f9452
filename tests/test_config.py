"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from sudpen.config import AppConfig, load_config


def _write(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(content, encoding="utf-8")
    return config_path


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()

        assert config.business_name == "Sudpen"
        assert config.whatsapp_number == "3917972545"
        assert config.timezone == "Europe/Rome"
        assert config.locale == "it"

    def test_load_from_yaml(self, tmp_path):
        config_path = _write(
            tmp_path,
            "business_name: Test Desk\n"
            "database_url: sqlite:///test.db\n"
            "whatsapp_number: '+39 391 7972545'\n"
            "timezone: Europe/Berlin\n",
        )

        config = AppConfig.load_from_yaml(config_path)

        assert config.business_name == "Test Desk"
        assert config.database_url == "sqlite:///test.db"
        assert config.whatsapp_number == "393917972545"
        assert config.timezone == "Europe/Berlin"

    def test_empty_file_uses_defaults(self, tmp_path):
        config = AppConfig.load_from_yaml(_write(tmp_path, ""))
        assert config == AppConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(_write(tmp_path, "business_name: [unclosed\n"))

    def test_root_must_be_mapping(self, tmp_path):
        with pytest.raises(ValueError, match="mapping"):
            AppConfig.load_from_yaml(_write(tmp_path, "- a\n- b\n"))

    def test_invalid_timezone(self):
        with pytest.raises(ValidationError):
            AppConfig(timezone="Mars/Olympus")

    def test_invalid_whatsapp_number(self):
        with pytest.raises(ValidationError):
            AppConfig(whatsapp_number="call me")

    def test_invalid_database_url(self):
        with pytest.raises(ValidationError):
            AppConfig(database_url="sudpen.db")

    def test_today_is_iso_date(self):
        assert len(AppConfig().today()) == 10


def test_load_config_explicit_path_must_exist(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_without_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sudpen.config.get_default_config_path", lambda: tmp_path / "config.yaml")

    assert load_config() == AppConfig()
