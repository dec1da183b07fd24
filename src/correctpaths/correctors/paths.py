"""Filesystem path correctors: upload dir info, upload_path option, font files."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from correctpaths.core.models import UploadDir
from correctpaths.core.relativize import has_marker, relativize
from correctpaths.roots import Roots

logger = logging.getLogger(__name__)

_UploadInfo = TypeVar("_UploadInfo", UploadDir, Mapping[str, Any])


def rebase(value: str, root: str, marker: str) -> str:
    """Replace everything up to ``marker`` in ``value`` with ``root``.

    Values without the marker are returned unchanged.
    """
    if not has_marker(value, marker):
        return value
    suffix = relativize(value, marker)
    if suffix == "/":
        return root
    return root + suffix


def correct_upload_dir(info: _UploadInfo, roots: Roots) -> _UploadInfo:
    """Correct the path and URL fields of upload directory info.

    ``path`` and ``basedir`` are rebased onto the content dir, ``url`` and
    ``baseurl`` onto the content URL. Accepts an UploadDir or a plain mapping
    and returns a corrected copy of the same kind. Anything else is returned
    unchanged.
    """
    if not isinstance(info, (UploadDir, Mapping)):
        return info

    marker = roots.content_marker
    targets = {
        "path": roots.content_dir,
        "basedir": roots.content_dir,
        "url": roots.content_url,
        "baseurl": roots.content_url,
    }

    if isinstance(info, UploadDir):
        current = info.model_dump()
    else:
        current = dict(info)

    updates: dict[str, str] = {}
    for key, root in targets.items():
        value = current.get(key)
        if isinstance(value, str):
            corrected = rebase(value, root, marker)
            if corrected != value:
                updates[key] = corrected

    if updates:
        logger.debug("Corrected upload dir fields: %s", ", ".join(sorted(updates)))

    if isinstance(info, UploadDir):
        return info.model_copy(update=updates)
    current.update(updates)
    return current


def correct_option_path(value: Any, roots: Roots) -> Any:
    """Correct a single path-valued option such as ``upload_path``."""
    if not isinstance(value, str):
        return value
    return rebase(value, roots.content_dir, roots.content_marker)


def correct_font_files(files: Any, roots: Roots) -> Any:
    """Correct every string element of a list of downloaded font files.

    Non-string elements are kept as they are. Mappings (font URL to local
    file) have their values corrected. Anything else is returned unchanged.
    """
    if isinstance(files, Mapping):
        return {key: correct_option_path(f, roots) for key, f in files.items()}
    if isinstance(files, (str, bytes)) or not isinstance(files, Sequence):
        return files
    return [correct_option_path(f, roots) for f in files]
