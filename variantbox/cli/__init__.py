"""Command-line interface for Variantbox."""

from variantbox.cli.app import app, main


__all__ = ["app", "main"]
