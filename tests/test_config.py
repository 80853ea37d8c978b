"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from reading_tracker.config import AppConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GOOGLE_BOOKS_API_KEY", raising=False)
    monkeypatch.delenv("READING_TRACKER_LOG_LEVEL", raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.setattr("reading_tracker.config.load_dotenv", lambda: False)


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.app.name == "Reading Tracker"

    def test_default_reading_assumptions(self) -> None:
        config = AppConfig()
        assert config.reading.words_per_page == 250
        assert config.reading.default_wpm == 200

    def test_default_catalog_config(self) -> None:
        config = AppConfig()
        assert config.catalog.base_url == "https://www.googleapis.com/books/v1"
        assert config.catalog.timeout is None
        assert config.catalog.api_key is None

    def test_default_logging_config(self) -> None:
        config = AppConfig()
        assert config.logging.level == "INFO"
        assert config.logging.json_format is False


class TestLoadConfig:
    """Test loading config from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "app": {"name": "Test App", "version": "0.1.0"},
            "reading": {"default_wpm": 180},
            "logging": {"json": True},
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data))

        config = load_config(config_file)
        assert config.app.name == "Test App"
        assert config.app.version == "0.1.0"
        assert config.reading.default_wpm == 180
        assert config.logging.json_format is True
        # Other fields keep defaults
        assert config.reading.words_per_page == 250

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.app.name == "Reading Tracker"

    def test_env_vars_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")

        monkeypatch.setenv("GOOGLE_BOOKS_API_KEY", "test-key-123")
        monkeypatch.setenv("READING_TRACKER_LOG_LEVEL", "debug")

        config = load_config(config_file)
        assert config.catalog.api_key == "test-key-123"
        assert config.logging.level == "DEBUG"

    def test_load_project_config_yaml(self) -> None:
        """Test loading the actual project config.yaml."""
        config = load_config(Path(__file__).parent.parent / "config.yaml")
        assert config.app.name == "Reading Tracker"
        assert config.storage.sqlite_path == "./data/reading_tracker.db"
