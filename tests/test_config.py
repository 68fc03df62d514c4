"""
Tests for settings and the command line entry point
"""

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from cli.main import app
from core.config import AppSettings
from core.domain.language import Language

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run without any AVTORENT_* variables or project .env"""
    monkeypatch.chdir(tmp_path)
    for name in ("LANGUAGE", "LOG_LEVEL", "SHOW_BANNER", "COLOR"):
        monkeypatch.delenv(f"AVTORENT_{name}", raising=False)


class TestAppSettings:
    """Tests for AppSettings"""

    def test_defaults(self):
        settings = AppSettings()
        assert settings.language is Language.ENGLISH
        assert settings.log_level == "WARNING"
        assert settings.show_banner is True
        assert settings.color is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("AVTORENT_LANGUAGE", "ru")
        monkeypatch.setenv("AVTORENT_LOG_LEVEL", "debug")
        monkeypatch.setenv("AVTORENT_COLOR", "false")
        settings = AppSettings()
        assert settings.language is Language.RUSSIAN
        assert settings.log_level == "DEBUG"
        assert settings.color is False

    def test_project_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("AVTORENT_SHOW_BANNER=false\n", encoding="utf-8")
        assert AppSettings().show_banner is False

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("AVTORENT_LOG_LEVEL", "loud")
        with pytest.raises(ValidationError):
            AppSettings()


class TestCli:
    """Tests for the typer application"""

    def test_session_exit(self):
        result = runner.invoke(app, ["--no-banner"], input="4\n")
        assert result.exit_code == 0
        assert "Main menu:" in result.output
        assert "Goodbye!" in result.output

    def test_banner(self):
        result = runner.invoke(app, [], input="4\n")
        assert result.exit_code == 0
        assert "AVTORENT" in result.output

    def test_russian_session(self):
        result = runner.invoke(app, ["--lang", "ru", "--no-banner"], input="4\n")
        assert result.exit_code == 0
        assert "До свидания!" in result.output

    def test_session_adds_driver(self):
        result = runner.invoke(app, ["--no-banner"], input="2\n1\n1\nIvan\nPetrov\n4\n5\n4\n")
        assert result.exit_code == 0
        assert "Driver added successfully!" in result.output
        assert "Total drivers: 1" in result.output

    def test_doctor(self):
        result = runner.invoke(app, ["doctor"])
        assert result.exit_code == 0
        assert "Avtorent Doctor" in result.output
