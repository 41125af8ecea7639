"""Command-line interface for tplgpp."""

from .app import app

__all__ = ["app"]
