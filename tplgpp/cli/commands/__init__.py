"""CLI commands for tplgpp."""

from . import (
    classes,
    config,
)

__all__ = [
    "classes",
    "config",
]
