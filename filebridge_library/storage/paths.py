"""Where filebridge keeps its own files.

Nothing here touches the served root. FILEBRIDGE_HOME (default: .filebridge
in the working directory) holds the daemon's private state:

    $FILEBRIDGE_HOME/
        config/config.yaml          read by config.loader.load_config
        logs/filebridged/daemon.log written by `filebridge start`, read by `filebridge logs`

Each subdirectory can be relocated on its own with FILEBRIDGE_CONFIG_DIR or
FILEBRIDGE_LOG_DIR. Directories are created on first access.
"""

import os
from pathlib import Path

DAEMON_LOG_NAME = "daemon.log"


def get_home_dir() -> Path:
    """Resolve FILEBRIDGE_HOME (~ expanded). Not created here."""
    return Path(os.environ.get("FILEBRIDGE_HOME", ".filebridge")).expanduser().resolve()


def _ensure_dir(override_var: str, *default_parts: str) -> Path:
    override = os.environ.get(override_var)
    if override is not None:
        directory = Path(override).expanduser().resolve()
    else:
        directory = get_home_dir().joinpath(*default_parts)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def get_config_dir() -> Path:
    """Directory holding config.yaml ($FILEBRIDGE_CONFIG_DIR or $FILEBRIDGE_HOME/config)."""
    return _ensure_dir("FILEBRIDGE_CONFIG_DIR", "config")


def get_log_dir() -> Path:
    """Directory holding the background daemon's output.

    $FILEBRIDGE_LOG_DIR when set, otherwise $FILEBRIDGE_HOME/logs/filebridged.
    """
    return _ensure_dir("FILEBRIDGE_LOG_DIR", "logs", "filebridged")


def get_daemon_log_path() -> Path:
    """File the CLI redirects a background daemon's stdout/stderr into."""
    return get_log_dir() / DAEMON_LOG_NAME
