"""correctpaths: rewrite migrated WordPress paths and URLs onto the current environment."""

__version__ = "1.3.0"
