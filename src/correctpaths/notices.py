"""Environment checks reported to the operator as non-blocking notices."""

from __future__ import annotations

import logging

from correctpaths.config import SiteConfig
from correctpaths.core.models import Notice, NoticeLevel

logger = logging.getLogger(__name__)


def _is_under(path: str, root: str) -> bool:
    path = path.replace("\\", "/").rstrip("/")
    root = root.replace("\\", "/").rstrip("/")
    return path == root or path.startswith(root + "/")


def check_environment(config: SiteConfig) -> list[Notice]:
    """Detect settings that conflict with path correction.

    Every notice is logged at its level. Nothing here stops correction from
    running.
    """
    notices: list[Notice] = []

    if config.uploads:
        notices.append(
            Notice(
                code="uploads_override",
                message=(
                    f"UPLOADS is defined as {config.uploads!r}. It takes precedence over "
                    "the corrected upload paths; remove it to let paths follow the "
                    "current installation root."
                ),
            )
        )

    if config.document_root and not _is_under(config.abspath, config.document_root):
        notices.append(
            Notice(
                code="document_root_mismatch",
                message=(
                    f"Installation root {config.abspath!r} is outside the document root "
                    f"{config.document_root!r}; corrected includes URLs will contain the "
                    "full filesystem path."
                ),
            )
        )

    for notice in notices:
        level = logging.WARNING if notice.level is NoticeLevel.WARNING else logging.INFO
        logger.log(level, "%s: %s", notice.code, notice.message)

    return notices
