"""Common utilities shared across all components."""

from . import ui

__all__ = [
    "ui",
]
