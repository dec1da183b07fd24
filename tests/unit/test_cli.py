"""Tests for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from correctpaths.cli import main


@pytest.fixture()
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write a site config and clear environment overrides."""
    for name in ("CORRECTPATHS_ABSPATH", "CORRECTPATHS_HOME_URL", "DOCUMENT_ROOT", "UPLOADS"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.dump({"abspath": "/var/www/new-site", "home_url": "https://new.example.com"})
    )
    return str(path)


class TestCLI:
    """Tests for Click CLI commands."""

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "correctpaths" in result.output
        assert "1.3.0" in result.output

    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "migrated wordpress paths" in result.output.lower()

    def test_relativize(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["relativize", "/var/www/old/wp-content/uploads/a.png"])
        assert result.exit_code == 0
        assert result.output.strip() == "/uploads/a.png"

    def test_relativize_custom_delimiter(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main, ["relativize", "/old/wp-includes/js/a.js", "-d", "wp-includes"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "/js/a.js"

    def test_roots_missing_config(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["roots", "-c", "/nonexistent/config.yaml"])
        assert result.exit_code == 1
        assert "Error loading config" in result.output

    def test_roots(self, config_file: str) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["roots", "-c", config_file])
        assert result.exit_code == 0
        assert "content_dir: /var/www/new-site/wp-content" in result.output
        assert "content_url: https://new.example.com/wp-content" in result.output
        assert "includes_dir: /var/www/new-site/wp-includes" in result.output
        assert "home_url_without_path: https://new.example.com" in result.output


class TestCorrectCommand:
    """Tests for the correct command."""

    def test_bare_string(self, config_file: str) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["correct", "option_upload_path", "/old/wp-content/uploads", "-c", config_file],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "/var/www/new-site/wp-content/uploads"

    def test_json_from_stdin(self, config_file: str) -> None:
        runner = CliRunner()
        payload = json.dumps({"basedir": "/old/wp-content/uploads"})
        result = runner.invoke(main, ["correct", "upload_dir", "-c", config_file], input=payload)
        assert result.exit_code == 0
        assert json.loads(result.output) == {"basedir": "/var/www/new-site/wp-content/uploads"}

    def test_includes_url_scheme(self, config_file: str) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                "correct",
                "includes_url",
                "https://old.example.com/wp-includes/js/jquery.js",
                "--scheme",
                "relative",
                "-c",
                config_file,
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "/wp-includes/js/jquery.js"

    def test_scheme_rejected_by_other_correctors(self, config_file: str) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["correct", "option_upload_path", "x", "--scheme", "https", "-c", config_file],
        )
        assert result.exit_code == 1
        assert "does not accept --scheme" in result.output

    def test_malformed_upload_dir_passes_through(self, config_file: str) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["correct", "upload_dir", "[1, 2]", "-c", config_file])
        assert result.exit_code == 0
        assert json.loads(result.output) == [1, 2]

    def test_string_upload_dir_passes_through(self, config_file: str) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main, ["correct", "upload_dir", "/old/wp-content/up", "-c", config_file]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "/old/wp-content/up"

    def test_scheme_accepted_only_by_includes_url(self, config_file: str) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main, ["correct", "upload_dir", "{}", "--scheme", "https", "-c", config_file]
        )
        assert result.exit_code == 1
        assert "does not accept --scheme" in result.output

    def test_unknown_corrector(self, config_file: str) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["correct", "nope", "x", "-c", config_file])
        assert result.exit_code == 1
        assert "Unknown corrector" in result.output


class TestCheckCommand:
    """Tests for the check command."""

    def test_no_problems(self, config_file: str) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["check", "-c", config_file])
        assert result.exit_code == 0
        assert "No problems found." in result.output

    def test_uploads_override(self, config_file: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UPLOADS", "files")
        runner = CliRunner()
        result = runner.invoke(main, ["check", "-c", config_file])
        assert result.exit_code == 0
        assert "[warning] uploads_override" in result.output
