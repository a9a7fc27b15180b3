"""
Unit tests for storage path resolution.
"""

from pathlib import Path

import pytest

from filebridge_library.storage import paths


@pytest.mark.unit
class TestPaths:
    """Test path resolution functions."""

    def test_get_home_dir_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test get_home_dir falls back to .filebridge when env var not set."""
        monkeypatch.delenv("FILEBRIDGE_HOME", raising=False)
        assert paths.get_home_dir() == Path(".filebridge").resolve()

    def test_get_home_dir_custom(self, mock_storage_env: Path) -> None:
        assert paths.get_home_dir() == mock_storage_env

    def test_get_config_dir_creates_directory(self, mock_storage_env: Path) -> None:
        config_dir = paths.get_config_dir()
        assert config_dir.is_dir()
        assert config_dir == mock_storage_env / "config"

    def test_get_config_dir_override(self, mock_storage_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        override = mock_storage_env / "elsewhere"
        monkeypatch.setenv("FILEBRIDGE_CONFIG_DIR", str(override))

        assert paths.get_config_dir() == override
        assert override.is_dir()

    def test_get_log_dir_creates_directory(self, mock_storage_env: Path) -> None:
        log_dir = paths.get_log_dir()
        assert log_dir.is_dir()
        assert log_dir.name == "filebridged"
        assert log_dir.parent.name == "logs"

    def test_get_log_dir_override(self, mock_storage_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        override = mock_storage_env / "custom-logs"
        monkeypatch.setenv("FILEBRIDGE_LOG_DIR", str(override))

        assert paths.get_log_dir() == override
        assert override.is_dir()

    def test_get_daemon_log_path(self, mock_storage_env: Path) -> None:
        log_path = paths.get_daemon_log_path()

        assert log_path == mock_storage_env / "logs" / "filebridged" / "daemon.log"
        assert log_path.parent.is_dir()
        assert not log_path.exists()

    def test_get_daemon_log_path_follows_log_dir(self, mock_storage_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILEBRIDGE_LOG_DIR", "~/filebridge-logs")
        monkeypatch.setenv("HOME", str(mock_storage_env))

        assert paths.get_daemon_log_path() == mock_storage_env / "filebridge-logs" / "daemon.log"

    def test_paths_are_absolute(self, mock_storage_env: Path) -> None:
        assert paths.get_home_dir().is_absolute()
        assert paths.get_config_dir().is_absolute()
        assert paths.get_log_dir().is_absolute()
