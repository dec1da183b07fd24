"""Tests for the error hierarchy."""

from __future__ import annotations

from correctpaths.core.errors import ConfigError, CorrectPathsError, UnknownCorrectorError


class TestErrorHierarchy:
    """Tests for error class hierarchy."""

    def test_config_error_is_correctpaths_error(self) -> None:
        assert issubclass(ConfigError, CorrectPathsError)

    def test_unknown_corrector_error_is_correctpaths_error(self) -> None:
        assert issubclass(UnknownCorrectorError, CorrectPathsError)


class TestUnknownCorrectorError:
    """Tests for UnknownCorrectorError messages."""

    def test_lists_available_names(self) -> None:
        error = UnknownCorrectorError("nope", ["includes_url", "upload_dir"])
        assert error.name == "nope"
        assert "'nope'" in str(error)
        assert "includes_url, upload_dir" in str(error)

    def test_no_available_names(self) -> None:
        error = UnknownCorrectorError("nope", [])
        assert "Available: none" in str(error)
