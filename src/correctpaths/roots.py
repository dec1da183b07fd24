"""Roots that migrated paths and URLs are rebased onto."""

from __future__ import annotations

import logging
from functools import cached_property
from urllib.parse import urlsplit

from correctpaths.config import SiteConfig

logger = logging.getLogger(__name__)


def _join(root: str, folder: str) -> str:
    return root.rstrip("/\\") + "/" + folder


class Roots:
    """Resolves the four correction roots from a SiteConfig.

    Each root is computed on first access and kept for the lifetime of the
    instance. Build a new Roots for a changed configuration.
    """

    def __init__(self, config: SiteConfig) -> None:
        self._config = config

    @property
    def config(self) -> SiteConfig:
        return self._config

    @property
    def content_marker(self) -> str:
        return self._config.content_folder

    @property
    def includes_marker(self) -> str:
        return self._config.includes_folder

    @cached_property
    def content_dir(self) -> str:
        """Installation root + content folder."""
        return _join(self._config.abspath, self._config.content_folder)

    @cached_property
    def includes_dir(self) -> str:
        """Installation root + includes folder."""
        return _join(self._config.abspath, self._config.includes_folder)

    @cached_property
    def home_url_without_path(self) -> str:
        """``scheme://host[:port]`` of the home URL.

        Falls back to the raw home URL when it does not parse into both a
        scheme and a host.
        """
        home = self._config.home_url
        try:
            parts = urlsplit(home)
        except ValueError:
            logger.warning("Cannot parse home URL %r, using it verbatim", home)
            return home
        if not parts.scheme or not parts.netloc:
            logger.warning("Home URL %r has no scheme or host, using it verbatim", home)
            return home
        return f"{parts.scheme}://{parts.netloc}"

    @cached_property
    def content_url(self) -> str:
        """Home URL without path + content folder."""
        return _join(self.home_url_without_path, self._config.content_folder)

    def as_dict(self) -> dict[str, str]:
        """All resolved roots, keyed by name."""
        return {
            "content_dir": self.content_dir,
            "content_url": self.content_url,
            "includes_dir": self.includes_dir,
            "home_url_without_path": self.home_url_without_path,
        }
