"""
Configuration management for the BrewCraft MCP server.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from brewcraft_common.exceptions import ConfigurationError


STORAGE_BACKENDS = ("local", "remote")
DEFAULT_DATA_DIR = "~/.brewcraft"


@dataclass
class BrewCraftConfig:
    """Configuration for BrewCraft storage and logging."""

    storage: str = "local"
    data_dir: Path = field(default_factory=lambda: Path(DEFAULT_DATA_DIR).expanduser())
    remote_url: str | None = None
    remote_api_key: str | None = None
    log_level: str = "INFO"

    @property
    def base_url(self) -> str | None:
        """Remote document store URL without a trailing slash."""
        return self.remote_url.rstrip("/") if self.remote_url else None


def get_config() -> BrewCraftConfig:
    """
    Get BrewCraft configuration from environment.

    Environment variables:
        BREWCRAFT_STORAGE: "local" (default) or "remote"
        BREWCRAFT_DATA_DIR: Directory for local JSON files (default ~/.brewcraft)
        BREWCRAFT_REMOTE_URL: Document store base URL (remote storage)
        BREWCRAFT_REMOTE_API_KEY: Bearer token for the document store
        BREWCRAFT_LOG_LEVEL: Logging level (default INFO)

    Returns:
        BrewCraftConfig instance

    Raises:
        ConfigurationError: If the storage backend is unknown or incomplete
    """
    storage = os.environ.get("BREWCRAFT_STORAGE", "local").strip().lower()
    data_dir = os.environ.get("BREWCRAFT_DATA_DIR", DEFAULT_DATA_DIR)
    remote_url = os.environ.get("BREWCRAFT_REMOTE_URL")
    remote_api_key = os.environ.get("BREWCRAFT_REMOTE_API_KEY")
    log_level = os.environ.get("BREWCRAFT_LOG_LEVEL", "INFO").upper()

    if storage not in STORAGE_BACKENDS:
        raise ConfigurationError(
            f"Unknown BREWCRAFT_STORAGE '{storage}'. "
            f"Use one of: {', '.join(STORAGE_BACKENDS)}"
        )

    if storage == "remote" and not remote_url:
        raise ConfigurationError(
            "BREWCRAFT_REMOTE_URL environment variable not set. "
            "Remote storage needs the document store base URL"
        )

    return BrewCraftConfig(
        storage=storage,
        data_dir=Path(data_dir).expanduser(),
        remote_url=remote_url,
        remote_api_key=remote_api_key,
        log_level=log_level,
    )
