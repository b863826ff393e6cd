"""CLI commands for hexfmt."""

from .render import render
from .version import version

__all__ = [
    "render",
    "version",
]
