"""Configuration loading for the filebridge daemon.

This module handles loading daemon configuration from YAML files
and environment variables.

Contract:
- Inputs: Config file paths, environment variables
- Outputs: BridgeSettings objects
- Side Effects: Creates default config file if missing
"""

import logging
import os
from pathlib import Path

import yaml

from ..storage.paths import get_config_dir
from .settings import BridgeSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = """# filebridge daemon configuration

# Server settings
host: "127.0.0.1"
port: 3000
log_level: "info"
workers: 1

# Directory exposed to remote clients. Nothing outside it can be read or changed.
# Supports: absolute paths (/srv/files), ~ for home directory, relative paths (./workspace)
# Can be overridden with FILEBRIDGE_ROOT_PATH environment variable
# root_path: "."

# cors_origins:
#   - "*"

# Search limits
# search_max_results: 100
# search_max_matches_per_file: 10
# search_max_file_bytes: 10485760
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to config.yaml in config directory

    Example:
        >>> config_path = get_config_path()
        >>> assert config_path.name == "config.yaml"
    """
    return get_config_dir() / "config.yaml"


def create_default_config() -> None:
    """Create default config file if it doesn't exist.

    Example:
        >>> create_default_config()
        >>> assert get_config_path().exists()
    """
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return

    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")


def load_config(config_path: Path | None = None) -> BridgeSettings:
    """Load daemon configuration from YAML and environment.

    Environment variables take precedence over YAML settings.
    Variables should be prefixed with FILEBRIDGE_ (e.g., FILEBRIDGE_PORT).

    Args:
        config_path: Optional config file path (default: config.yaml in config dir)

    Returns:
        Validated daemon settings

    Example:
        >>> settings = load_config()
        >>> assert isinstance(settings, BridgeSettings)
        >>> assert settings.port > 0
    """
    if config_path is None:
        config_path = get_config_path()
        if not config_path.exists():
            create_default_config()

    yaml_settings = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
            logger.debug(f"Loaded config from {config_path}")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")

    if not isinstance(yaml_settings, dict):
        logger.warning(f"Ignoring config at {config_path}: expected a mapping")
        yaml_settings = {}

    # Only pass YAML values that don't have corresponding env vars
    # so precedence is defaults < YAML < env vars
    filtered_yaml = {}
    for key, value in yaml_settings.items():
        env_key = f"FILEBRIDGE_{str(key).upper()}"
        if env_key not in os.environ:
            filtered_yaml[key] = value

    settings = BridgeSettings(**filtered_yaml)

    logger.debug(
        f"Configuration loaded: host={settings.host}, port={settings.port}, "
        f"log_level={settings.log_level}, root_path={settings.root_path}"
    )

    return settings
