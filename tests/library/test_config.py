"""
Unit tests for configuration loading.

Tests config file creation, loading from YAML, and environment variable overrides.
"""

from pathlib import Path

import pytest

from filebridge_library.config import loader
from filebridge_library.config.settings import BridgeSettings


@pytest.mark.unit
class TestConfigLoader:
    """Test configuration loading functions."""

    def test_get_config_path_returns_config_yaml(self, mock_storage_env: Path) -> None:
        config_path = loader.get_config_path()

        assert config_path.name == "config.yaml"
        assert config_path.parent == mock_storage_env / "config"

    def test_create_default_config_writes_yaml(self, mock_storage_env: Path) -> None:
        loader.create_default_config()

        content = loader.get_config_path().read_text()
        assert "host:" in content
        assert "port: 3000" in content
        assert "root_path" in content

    def test_create_default_config_is_idempotent(self, mock_storage_env: Path) -> None:
        """Test create_default_config doesn't overwrite existing config."""
        config_path = loader.get_config_path()
        loader.create_default_config()

        custom_content = "# Custom config\nhost: custom\n"
        config_path.write_text(custom_content)
        loader.create_default_config()

        assert config_path.read_text() == custom_content

    def test_load_config_creates_default_if_missing(self, mock_storage_env: Path) -> None:
        config_path = loader.get_config_path()
        assert not config_path.exists()

        settings = loader.load_config()

        assert config_path.exists()
        assert isinstance(settings, BridgeSettings)
        assert settings.port == 3000

    def test_load_config_parses_yaml_settings(self, mock_storage_env: Path, tmp_path: Path) -> None:
        exposed = tmp_path / "exposed"
        exposed.mkdir()
        loader.get_config_path().write_text(
            f"""
host: "0.0.0.0"
port: 9999
log_level: "debug"
root_path: "{exposed}"
search_max_results: 5
"""
        )

        settings = loader.load_config()

        assert settings.host == "0.0.0.0"
        assert settings.port == 9999
        assert settings.log_level == "debug"
        assert settings.root_path == str(exposed.resolve())
        assert settings.search_max_results == 5

    def test_load_config_env_overrides_yaml(self, mock_storage_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variables override YAML settings."""
        loader.get_config_path().write_text("host: 127.0.0.1\nport: 3000\n")
        monkeypatch.setenv("FILEBRIDGE_HOST", "0.0.0.0")
        monkeypatch.setenv("FILEBRIDGE_PORT", "9999")

        settings = loader.load_config()

        assert settings.host == "0.0.0.0"
        assert settings.port == 9999

    def test_load_config_handles_invalid_yaml(self, mock_storage_env: Path, caplog) -> None:
        """Test load_config handles corrupted YAML gracefully."""
        loader.get_config_path().write_text("{{invalid yaml content\n")

        settings = loader.load_config()

        assert isinstance(settings, BridgeSettings)
        assert "Failed to load config" in caplog.text

    def test_load_config_ignores_non_mapping(self, mock_storage_env: Path) -> None:
        loader.get_config_path().write_text("- just\n- a list\n")

        settings = loader.load_config()

        assert settings.port == 3000

    def test_load_config_with_custom_path(self, mock_storage_env: Path) -> None:
        custom_path = mock_storage_env / "custom-config.yaml"
        custom_path.write_text("host: custom.example.com\nport: 7777\n")

        settings = loader.load_config(config_path=custom_path)

        assert settings.host == "custom.example.com"
        assert settings.port == 7777
        assert not loader.get_config_path().exists()


@pytest.mark.unit
class TestBridgeSettings:
    """Test BridgeSettings model."""

    def test_default_values(self, mock_storage_env: Path) -> None:
        settings = BridgeSettings()

        assert settings.host == "127.0.0.1"
        assert settings.port == 3000
        assert settings.log_level == "info"
        assert settings.workers == 1
        assert settings.cors_origins == ["*"]
        assert settings.tree_default_depth == 3
        assert settings.root_path == str(Path(".").resolve())

    def test_root_path_expands_home(self, mock_storage_env: Path) -> None:
        settings = BridgeSettings(root_path="~")

        assert settings.root_path == str(Path.home().resolve())

    def test_rejects_invalid_port(self, mock_storage_env: Path) -> None:
        with pytest.raises(ValueError):
            BridgeSettings(port=0)
        with pytest.raises(ValueError):
            BridgeSettings(port=70000)
