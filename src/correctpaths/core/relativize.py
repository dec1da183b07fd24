"""Marker-based extraction of root-independent path suffixes."""

from __future__ import annotations

import functools
import re

_SEPARATORS = "/\\"


@functools.lru_cache(maxsize=None)
def marker_pattern(delimiter: str) -> re.Pattern[str]:
    """Compile the pattern matching ``delimiter`` as a whole path segment.

    The segment must be preceded by a separator or the start of the string,
    and followed by a separator or the end of the string, so ``wp-contents``
    or ``old-wp-content`` never match.
    """
    return re.compile(rf"(?:^|[/\\]){re.escape(delimiter)}(?=[/\\]|$)")


def find_marker(path: str, delimiter: str) -> re.Match[str] | None:
    """Return the earliest match of ``delimiter`` in ``path``, or None."""
    if not path or not delimiter:
        return None
    return marker_pattern(delimiter).search(path)


def relativize(path: str, delimiter: str) -> str:
    """Strip everything up to and including the marker segment.

    Returns ``/`` followed by the remainder of ``path`` after the earliest
    occurrence of ``delimiter``. When the marker is absent the input is
    returned unchanged.

    Examples:
        >>> relativize("/var/www/old/wp-content/uploads/a.png", "wp-content")
        '/uploads/a.png'
        >>> relativize("/var/www/old/wp-content", "wp-content")
        '/'
        >>> relativize("https://cdn.example.com/lib.js", "wp-content")
        'https://cdn.example.com/lib.js'
    """
    match = find_marker(path, delimiter)
    if match is None:
        return path
    return "/" + path[match.end() :].lstrip(_SEPARATORS)


def has_marker(path: str, delimiter: str) -> bool:
    """Whether ``path`` contains ``delimiter`` as a path segment."""
    return find_marker(path, delimiter) is not None
