"""Correctors rebasing migrated values onto the current environment's roots."""

from correctpaths.correctors.paths import (
    correct_font_files,
    correct_option_path,
    correct_upload_dir,
    rebase,
)
from correctpaths.correctors.urls import (
    correct_asset_url,
    correct_includes_url,
    sweep_asset_urls,
)

__all__ = [
    "correct_asset_url",
    "correct_font_files",
    "correct_includes_url",
    "correct_option_path",
    "correct_upload_dir",
    "rebase",
    "sweep_asset_urls",
]
