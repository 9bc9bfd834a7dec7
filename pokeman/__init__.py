"""ABOUTME: Pokeman type effectiveness and moveset analysis toolkit.
ABOUTME: Exposes the package version used by settings and the CLI."""

__version__ = "0.1.0"
