"""Tests for psychology/settings.py."""

import os
from unittest.mock import patch

from psychology.settings import ScoringSettings, load_settings


class TestLoadSettings:
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = load_settings()
        assert settings == ScoringSettings()
        assert settings.test_threshold == 3.75
        assert settings.query_key == "encdata"

    @patch.dict(os.environ, {
        "PSYCHOLOGY_TEST_THRESHOLD": "5.5",
        "PSYCHOLOGY_QUERY_KEY": "result",
    }, clear=True)
    def test_reads_env(self):
        settings = load_settings()
        assert settings.test_threshold == 5.5
        assert settings.query_key == "result"

    @patch.dict(os.environ, {"PSYCHOLOGY_TEST_THRESHOLD": "high"}, clear=True)
    def test_invalid_number_falls_back(self, caplog):
        settings = load_settings()
        assert settings.test_threshold == 3.75
        assert "PSYCHOLOGY_TEST_THRESHOLD" in caplog.text


class TestEnvFile:
    @patch.dict(os.environ, {}, clear=True)
    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PSYCHOLOGY_TEST_THRESHOLD=4.5\nPSYCHOLOGY_QUERY_KEY=data\n")
        settings = load_settings(env_file)
        assert settings.test_threshold == 4.5
        assert settings.query_key == "data"

    @patch.dict(os.environ, {"PSYCHOLOGY_QUERY_KEY": "fromenv"}, clear=True)
    def test_process_env_wins(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PSYCHOLOGY_QUERY_KEY=fromfile\n")
        assert load_settings(env_file).query_key == "fromenv"

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.env")
        assert settings == ScoringSettings()

    @patch.dict(os.environ, {}, clear=True)
    def test_does_not_modify_environ(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PSYCHOLOGY_QUERY_KEY=data\n")
        load_settings(env_file)
        assert "PSYCHOLOGY_QUERY_KEY" not in os.environ
