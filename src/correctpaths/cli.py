"""CLI entry point for correctpaths."""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

import click

from correctpaths import __version__
from correctpaths.core.models import CONTENT_MARKER, UrlScheme

if TYPE_CHECKING:
    from correctpaths.container import Container


@click.group()
@click.version_option(version=__version__, prog_name="correctpaths")
def main() -> None:
    """Correctpaths: rewrite migrated WordPress paths and URLs for this environment."""
    pass


_config_option = click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Path to config file (default: ~/.correctpaths/config.yaml)",
)

_verbose_option = click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose (DEBUG) logging",
)

# Correctors taking a scheme keyword
_SCHEME_CORRECTORS = frozenset({"includes_url"})


@main.command()
@click.argument("path")
@click.option(
    "-d",
    "--delimiter",
    default=CONTENT_MARKER,
    show_default=True,
    help="Marker segment to cut at",
)
def relativize(path: str, delimiter: str) -> None:
    """Print PATH with everything up to the marker segment removed."""
    from correctpaths.core.relativize import relativize as _relativize

    click.echo(_relativize(path, delimiter))


@main.command()
@_config_option
@_verbose_option
def roots(config_path: str | None, verbose: bool) -> None:
    """Show the roots values are corrected onto."""
    container = _load_container(config_path, verbose)

    for name, value in container.roots.as_dict().items():
        click.echo(f"{name}: {value}")


@main.command()
@click.argument("name")
@click.argument("value", required=False)
@_config_option
@click.option(
    "--scheme",
    type=click.Choice([s.value for s in UrlScheme]),
    default=None,
    help="URL scheme for includes_url",
)
@_verbose_option
def correct(
    name: str, value: str | None, config_path: str | None, scheme: str | None, verbose: bool
) -> None:
    """Apply the corrector NAME to VALUE (JSON or a bare string; stdin if omitted)."""
    from correctpaths.core.errors import UnknownCorrectorError

    container = _load_container(config_path, verbose)

    try:
        container.registry.get(name)
    except UnknownCorrectorError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if scheme and name not in _SCHEME_CORRECTORS:
        click.echo(f"Error: corrector {name!r} does not accept --scheme", err=True)
        sys.exit(1)

    raw = value if value is not None else click.get_text_stream("stdin").read().strip()
    data = _parse_value(raw)

    kwargs = {"scheme": scheme} if scheme else {}
    result = container.registry.apply(name, data, **kwargs)

    if isinstance(result, str):
        click.echo(result)
    else:
        click.echo(json.dumps(result, indent=2))


@main.command()
@_config_option
@_verbose_option
def check(config_path: str | None, verbose: bool) -> None:
    """Report settings that conflict with path correction."""
    from correctpaths.notices import check_environment

    container = _load_container(config_path, verbose)
    notices = check_environment(container.config)

    if not notices:
        click.echo("No problems found.")
        return
    for notice in notices:
        click.echo(f"[{notice.level.value}] {notice.code}: {notice.message}")


def _load_container(config_path: str | None, verbose: bool) -> Container:
    from correctpaths.config import load_config
    from correctpaths.container import Container

    try:
        config = load_config(config_path)
    except Exception as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)

    _setup_logging(verbose, config.log_level)
    return Container.create_default(config)


def _parse_value(raw: str) -> object:
    """Decode JSON input, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _setup_logging(verbose: bool, level_name: str = "INFO") -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
