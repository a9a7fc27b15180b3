"""Settings models for the filebridge daemon.

This module defines the configuration structure for the daemon and the
filesystem core it serves.

Contract:
- Inputs: Environment variables, YAML files
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pathlib import Path

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class BridgeSettings(BaseSettings):
    """Configuration for the filebridge daemon.

    Attributes:
        host: Listen address (default: 127.0.0.1)
        port: Listen port (default: 3000)
        log_level: Logging level (default: info)
        workers: Number of workers (default: 1)
        root_path: Directory every request is confined to (default: current directory)
        cors_origins: Allowed CORS origins (default: all)
        sniff_bytes: Size of the first chunk inspected for binary detection
        search_max_results: Result cap for a single search
        search_max_matches_per_file: Line match cap per file
        search_max_file_bytes: Files larger than this are matched by name only
        tree_default_depth: Depth used when a tree request gives none

    Example:
        >>> settings = BridgeSettings()
        >>> assert settings.host == "127.0.0.1"
        >>> assert settings.port == 3000
    """

    model_config = SettingsConfigDict(
        env_prefix="FILEBRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = "info"
    workers: int = Field(default=1, ge=1, le=16)

    root_path: str = "."
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    sniff_bytes: int = Field(default=64 * 1024, ge=1)
    search_max_results: int = Field(default=100, ge=1)
    search_max_matches_per_file: int = Field(default=10, ge=1)
    search_max_file_bytes: int = Field(default=10 * 1024 * 1024, ge=1)
    tree_default_depth: int = Field(default=3, ge=1)

    @field_validator("root_path")
    @classmethod
    def expand_and_resolve_path(cls, v: str) -> str:
        """Expand ~ and resolve to absolute path.

        This allows users to specify paths like:
        - "~" or "~/projects" (expands to user home)
        - "./workspace" (resolves relative to cwd)
        - "/srv/files" (absolute paths pass through)

        Args:
            v: Path string (may contain ~ or be relative)

        Returns:
            Absolute path as string
        """
        return str(Path(v).expanduser().resolve())
