"""Configuration loading and validation for correctpaths."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from correctpaths.core.errors import ConfigError
from correctpaths.core.models import CONTENT_MARKER, INCLUDES_MARKER

DEFAULT_CONFIG_PATH = "~/.correctpaths/config.yaml"

# Environment variable -> config key
_ENV_OVERRIDES = {
    "CORRECTPATHS_ABSPATH": "abspath",
    "CORRECTPATHS_HOME_URL": "home_url",
    "DOCUMENT_ROOT": "document_root",
    "UPLOADS": "uploads",
}


class SiteConfig(BaseModel):
    """Environment of the WordPress installation paths are corrected onto."""

    abspath: str = Field(description="Absolute installation root (ABSPATH)")
    home_url: str = Field(description="Configured home URL of the site")
    content_folder: str = Field(default=CONTENT_MARKER, description="Content folder name")
    includes_folder: str = Field(default=INCLUDES_MARKER, description="Includes folder name")
    document_root: str | None = Field(
        default=None, description="Web server document root (defaults to abspath)"
    )
    uploads: str | None = Field(default=None, description="UPLOADS override, if defined")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("abspath", "home_url")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty roots."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator("content_folder", "includes_folder")
    @classmethod
    def validate_folder(cls, v: str) -> str:
        """Folder names are single segments without surrounding separators."""
        folder = v.strip().strip("/\\")
        if not folder:
            raise ValueError(f"Invalid folder name: {v!r}")
        return folder

    @property
    def effective_document_root(self) -> str:
        """Document root used to turn filesystem paths into URL paths."""
        return self.document_root or self.abspath


def load_config(path: str | None = None) -> SiteConfig:
    """Load and validate configuration from a YAML file.

    Environment variable overrides:
        CORRECTPATHS_ABSPATH: overrides abspath
        CORRECTPATHS_HOME_URL: overrides home_url
        DOCUMENT_ROOT: overrides document_root
        UPLOADS: overrides uploads

    Args:
        path: Path to config file. Defaults to ~/.correctpaths/config.yaml.

    Returns:
        Validated SiteConfig.

    Raises:
        ConfigError: If config file is missing, unreadable, or invalid.
    """
    config_path = Path(path or DEFAULT_CONFIG_PATH).expanduser()

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        raw = config_path.read_text()
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a YAML mapping")

    for env_name, key in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            data[key] = value

    try:
        return SiteConfig(**data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
