"""Shared test fixtures for correctpaths."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from correctpaths.config import SiteConfig
from correctpaths.container import Container
from correctpaths.roots import Roots


@pytest.fixture()
def site_config() -> SiteConfig:
    """A site installed at /var/www/new-site, served from https://new.example.com."""
    return SiteConfig(abspath="/var/www/new-site/", home_url="https://new.example.com")


@pytest.fixture()
def roots(site_config: SiteConfig) -> Roots:
    """Roots for the default test site."""
    return Roots(site_config)


@pytest.fixture()
def container(site_config: SiteConfig) -> Container:
    """Container with all built-in correctors registered."""
    return Container.create_default(site_config)


@pytest.fixture()
def make_roots() -> Callable[..., Roots]:
    """Factory for roots of a custom site config."""

    def _make(**kwargs: Any) -> Roots:
        defaults: dict[str, Any] = {
            "abspath": "/var/www/new-site/",
            "home_url": "https://new.example.com",
        }
        defaults.update(kwargs)
        return Roots(SiteConfig(**defaults))

    return _make
