"""Tests for DI container."""

from __future__ import annotations

from correctpaths.config import SiteConfig
from correctpaths.container import Container
from correctpaths.correctors.registry import CorrectorRegistry


class TestContainer:
    """Tests for Container factories."""

    def test_create_default(self, site_config: SiteConfig) -> None:
        container = Container.create_default(site_config)

        assert container.config is site_config
        assert container.roots.config is site_config
        assert "upload_dir" in container.registry.names

    def test_default_registry_uses_container_roots(self, container: Container) -> None:
        result = container.registry.apply("option_upload_path", "/old/wp-content/uploads")
        assert result == container.roots.content_dir + "/uploads"

    def test_create_for_testing_defaults(self) -> None:
        container = Container.create_for_testing()

        assert container.config.home_url == "https://new.example.com"
        assert container.roots.content_dir == "/var/www/new-site/wp-content"
        assert container.registry.names == []

    def test_create_for_testing_with_custom_registry(self, site_config: SiteConfig) -> None:
        container = Container.create_for_testing(config=site_config)
        registry = CorrectorRegistry(container.roots, {"noop": lambda value, roots: value})

        container = Container.create_for_testing(config=site_config, registry=registry)

        assert container.registry.apply("noop", "x") == "x"
