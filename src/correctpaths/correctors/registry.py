"""Corrector registry: routes filter names to corrector callables."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from correctpaths.core.errors import UnknownCorrectorError
from correctpaths.correctors.paths import (
    correct_font_files,
    correct_option_path,
    correct_upload_dir,
)
from correctpaths.correctors.urls import correct_includes_url, sweep_asset_urls
from correctpaths.roots import Roots

logger = logging.getLogger(__name__)

Corrector = Callable[..., Any]


class CorrectorRegistry:
    """Maps filter names (as WordPress names them) to correctors.

    The embedding application calls ``apply`` explicitly at the point where a
    value needs correcting; nothing is invoked implicitly.
    """

    def __init__(self, roots: Roots, correctors: Mapping[str, Corrector] | None = None) -> None:
        self._roots = roots
        self._correctors: dict[str, Corrector] = dict(correctors) if correctors else {}

    @property
    def names(self) -> list[str]:
        """Registered filter names, sorted."""
        return sorted(self._correctors)

    def register(self, name: str, corrector: Corrector) -> None:
        """Register a corrector, replacing any previous one under ``name``."""
        if name in self._correctors:
            logger.debug("Replacing corrector %s", name)
        self._correctors[name] = corrector

    def get(self, name: str) -> Corrector:
        """Look up a corrector by filter name."""
        try:
            return self._correctors[name]
        except KeyError:
            raise UnknownCorrectorError(name, self.names) from None

    def apply(self, name: str, value: Any, **kwargs: Any) -> Any:
        """Run the corrector registered under ``name`` on ``value``.

        Returns the corrected copy; ``value`` itself is not modified.
        """
        corrector = self.get(name)
        corrected = corrector(value, self._roots, **kwargs)
        logger.debug("Applied %s: %r -> %r", name, value, corrected)
        return corrected


def _sweep_registries(value: Any, roots: Roots) -> Any:
    """Adapter for ``{"scripts": {...}, "styles": {...}}`` payloads."""
    if not isinstance(value, Mapping):
        return value
    scripts, styles = sweep_asset_urls(value.get("scripts", {}), value.get("styles", {}), roots)
    return {**value, "scripts": scripts, "styles": styles}


DEFAULT_CORRECTORS: dict[str, Corrector] = {
    "upload_dir": correct_upload_dir,
    "option_upload_path": correct_option_path,
    "kirki_downloaded_font_files": correct_font_files,
    "includes_url": correct_includes_url,
    "asset_registries": _sweep_registries,
}


def default_registry(roots: Roots) -> CorrectorRegistry:
    """Registry with all built-in correctors."""
    return CorrectorRegistry(roots, DEFAULT_CORRECTORS)
