"""Domain models for correctpaths."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

CONTENT_MARKER = "wp-content"
INCLUDES_MARKER = "wp-includes"


class UrlScheme(str, Enum):
    """Scheme requested for a corrected URL."""

    HTTP = "http"
    HTTPS = "https"
    RELATIVE = "relative"


class UploadDir(BaseModel):
    """Upload directory information as reported by WordPress' wp_upload_dir()."""

    path: str | None = Field(default=None, description="Absolute path of the current upload dir")
    url: str | None = Field(default=None, description="URL of the current upload dir")
    subdir: str | None = Field(default=None, description="Year/month subdirectory, if any")
    basedir: str | None = Field(default=None, description="Absolute path of the uploads root")
    baseurl: str | None = Field(default=None, description="URL of the uploads root")
    error: str | bool | None = Field(default=None, description="Error reported by the host")


class AssetEntry(BaseModel):
    """A registered script or style."""

    handle: str = Field(description="Registration handle")
    src: str | None = Field(default=None, description="Source URL, None for alias handles")
    deps: list[str] = Field(default_factory=list, description="Handles this asset depends on")
    ver: str | None = Field(default=None, description="Version query string")


class NoticeLevel(str, Enum):
    """Severity of an environment notice."""

    INFO = "info"
    WARNING = "warning"


class Notice(BaseModel):
    """Non-blocking message for the operator about the environment."""

    code: str = Field(description="Stable identifier of the condition")
    level: NoticeLevel = Field(default=NoticeLevel.WARNING)
    message: str = Field(description="Human-readable explanation")
