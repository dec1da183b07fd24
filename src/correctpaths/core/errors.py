"""Error hierarchy for correctpaths."""

from __future__ import annotations


class CorrectPathsError(Exception):
    """Base exception for all correctpaths errors."""

    pass


class ConfigError(CorrectPathsError):
    """Configuration loading or validation error."""

    pass


class UnknownCorrectorError(CorrectPathsError):
    """No corrector is registered under the requested filter name."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown corrector: {name!r}. Available: {', '.join(available) or 'none'}"
        )
