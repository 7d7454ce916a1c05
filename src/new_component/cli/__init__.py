"""Command-line interface for new-component."""

from new_component.cli.app import app

__all__ = ["app"]
