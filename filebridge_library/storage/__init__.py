"""Storage locations for filebridge_library.

Public Interface:
    - get_home_dir: Get FILEBRIDGE_HOME
    - get_config_dir: Get config directory
    - get_log_dir: Get log directory
    - get_daemon_log_path: Get the background daemon's log file
"""

from .paths import get_config_dir
from .paths import get_daemon_log_path
from .paths import get_home_dir
from .paths import get_log_dir

__all__ = [
    "get_home_dir",
    "get_config_dir",
    "get_daemon_log_path",
    "get_log_dir",
]
