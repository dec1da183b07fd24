"""URL correctors: includes URLs and registered script/style sources."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import SplitResult, urlsplit

from correctpaths.core.models import AssetEntry, UrlScheme
from correctpaths.core.relativize import has_marker, relativize
from correctpaths.correctors.paths import rebase
from correctpaths.roots import Roots

logger = logging.getLogger(__name__)


def _coerce_scheme(scheme: UrlScheme | str | None) -> UrlScheme | None:
    if scheme is None or isinstance(scheme, UrlScheme):
        return scheme
    try:
        return UrlScheme(scheme.lower())
    except ValueError:
        logger.debug("Ignoring unsupported URL scheme %r", scheme)
        return None


def _split(url: str) -> SplitResult | None:
    try:
        return urlsplit(url)
    except ValueError:
        return None


def _home_prefix(roots: Roots, scheme: UrlScheme | None) -> str:
    home = roots.home_url_without_path
    if scheme in (UrlScheme.HTTP, UrlScheme.HTTPS) and "://" in home:
        return scheme.value + home[home.index("://") :]
    return home


def _scheme_relative_prefix(roots: Roots) -> str:
    parts = _split(roots.home_url_without_path)
    if parts is None or not parts.netloc:
        return ""
    return "//" + parts.netloc


def _includes_url_path(roots: Roots) -> str:
    """Includes dir as a URL path, relative to the document root."""
    includes_dir = roots.includes_dir.replace("\\", "/")
    document_root = roots.config.effective_document_root.replace("\\", "/").rstrip("/")
    if includes_dir.startswith(document_root + "/"):
        return includes_dir[len(document_root) :]
    return includes_dir


def correct_includes_url(
    url: Any, roots: Roots, scheme: UrlScheme | str | None = None
) -> Any:
    """Rebase a URL pointing into the includes folder onto the current site.

    URLs without the includes marker are returned unchanged. With
    ``scheme='relative'`` the result is a host-relative path; ``http`` or
    ``https`` force that scheme on the home URL; None keeps the home URL's
    own scheme.
    """
    if not isinstance(url, str) or not has_marker(url, roots.includes_marker):
        return url

    path = _includes_url_path(roots) + relativize(url, roots.includes_marker)
    requested = _coerce_scheme(scheme)
    if requested is UrlScheme.RELATIVE:
        return path
    return _home_prefix(roots, requested) + path


def correct_asset_url(src: Any, roots: Roots) -> Any:
    """Correct the source URL of one registered script or style.

    Absolute sources are rebased onto the home URL. Content sources without a
    scheme are reduced to their path below the content folder; includes
    sources without a scheme stay host-relative or scheme-relative.
    """
    if not isinstance(src, str):
        return src
    parts = _split(src)
    if parts is None:
        return src

    if has_marker(src, roots.includes_marker):
        if not parts.netloc:
            return correct_includes_url(src, roots, UrlScheme.RELATIVE)
        if not parts.scheme:
            return _scheme_relative_prefix(roots) + correct_includes_url(
                src, roots, UrlScheme.RELATIVE
            )
        return correct_includes_url(src, roots)

    if has_marker(src, roots.content_marker):
        if not parts.scheme:
            return relativize(src, roots.content_marker)
        return rebase(src, roots.content_url, roots.content_marker)

    return src


def _correct_registry(registry: Any, roots: Roots) -> Any:
    if not isinstance(registry, Mapping):
        return registry
    corrected: dict[str, Any] = {}
    changed = 0
    for handle, entry in registry.items():
        if isinstance(entry, AssetEntry):
            src = correct_asset_url(entry.src, roots)
            if src != entry.src:
                changed += 1
                entry = entry.model_copy(update={"src": src})
        else:
            src = correct_asset_url(entry, roots)
            if src != entry:
                changed += 1
                entry = src
        corrected[handle] = entry
    logger.debug("Corrected %d of %d registered assets", changed, len(registry))
    return corrected


def sweep_asset_urls(
    scripts: Mapping[str, Any], styles: Mapping[str, Any], roots: Roots
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Correct every source URL in the script and style registries.

    Entries may be AssetEntry models or bare source strings. Returns corrected
    copies of both registries, in that order.
    """
    return _correct_registry(scripts, roots), _correct_registry(styles, roots)
