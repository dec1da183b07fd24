"""Dependency injection container for correctpaths."""

from __future__ import annotations

from dataclasses import dataclass

from correctpaths.config import SiteConfig
from correctpaths.correctors.registry import CorrectorRegistry
from correctpaths.roots import Roots


@dataclass
class Container:
    """DI container holding the configuration, its roots and the correctors."""

    config: SiteConfig
    roots: Roots
    registry: CorrectorRegistry

    @staticmethod
    def create_default(config: SiteConfig) -> Container:
        """Create a container with all built-in correctors registered."""
        from correctpaths.correctors.registry import default_registry

        roots = Roots(config)
        return Container(config=config, roots=roots, registry=default_registry(roots))

    @staticmethod
    def create_for_testing(
        config: SiteConfig | None = None,
        roots: Roots | None = None,
        registry: CorrectorRegistry | None = None,
    ) -> Container:
        """Create a container for tests.

        All parameters are optional. The default configuration describes a
        site installed at /var/www/new-site served from https://new.example.com,
        and the default registry is empty.
        """
        if config is None:
            config = SiteConfig(
                abspath="/var/www/new-site/",
                home_url="https://new.example.com",
            )
        roots = roots or Roots(config)
        return Container(
            config=config,
            roots=roots,
            registry=registry or CorrectorRegistry(roots),
        )
