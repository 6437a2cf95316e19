"""Tests for config.py - settings resolution."""

import json
import pytest
from pathlib import Path

from task_cli.config import TaskConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove any task-cli environment overrides."""
    for name in ["TASK_CLI_HOME", "TASK_CLI_HOST", "TASK_CLI_PORT", "PORT", "TASK_CLI_LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)


class TestTaskConfig:
    """Tests for TaskConfig dataclass."""

    def test_defaults(self):
        """Test default values."""
        config = TaskConfig()
        assert config.data_dir == Path.home() / ".task-cli"
        assert config.host == "127.0.0.1"
        assert config.port == 3000
        assert config.log_level == "WARNING"
        assert config.max_title_display == 60

    def test_config_file_path(self, tmp_path):
        """Test config.json lives in the data directory."""
        assert TaskConfig(data_dir=tmp_path).config_file == tmp_path / "config.json"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_explicit_data_dir(self, tmp_path):
        """Test an explicit directory is used."""
        config = load_config(tmp_path)
        assert config.data_dir == tmp_path

    def test_home_from_env(self, tmp_path, monkeypatch):
        """Test TASK_CLI_HOME sets the data directory."""
        monkeypatch.setenv("TASK_CLI_HOME", str(tmp_path))
        assert load_config().data_dir == tmp_path

    def test_explicit_beats_env(self, tmp_path, monkeypatch):
        """Test the argument wins over TASK_CLI_HOME."""
        monkeypatch.setenv("TASK_CLI_HOME", str(tmp_path / "env"))
        assert load_config(tmp_path / "arg").data_dir == tmp_path / "arg"

    def test_load_from_file(self, tmp_path):
        """Test loading settings from config.json."""
        (tmp_path / "config.json").write_text(json.dumps({
            "host": "0.0.0.0",
            "port": 8080,
            "log_level": "info",
            "max_title_display": 0,
        }))

        config = load_config(tmp_path)
        assert config.host == "0.0.0.0"
        assert config.port == 8080
        assert config.log_level == "INFO"
        assert config.max_title_display == 0

    def test_env_beats_file(self, tmp_path, monkeypatch):
        """Test environment variables override config.json."""
        (tmp_path / "config.json").write_text(json.dumps({"port": 8080, "host": "0.0.0.0"}))
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("TASK_CLI_HOST", "localhost")

        config = load_config(tmp_path)
        assert config.port == 9000
        assert config.host == "localhost"

    def test_prefixed_port_wins(self, tmp_path, monkeypatch):
        """Test TASK_CLI_PORT is preferred over PORT."""
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("TASK_CLI_PORT", "9100")
        assert load_config(tmp_path).port == 9100

    def test_invalid_json_uses_defaults(self, tmp_path):
        """Test a broken config.json is ignored."""
        (tmp_path / "config.json").write_text("{broken")
        config = load_config(tmp_path)
        assert config.port == 3000

    def test_invalid_port_uses_default(self, tmp_path, monkeypatch):
        """Test a non-numeric port falls back."""
        monkeypatch.setenv("PORT", "eighty")
        assert load_config(tmp_path).port == 3000
