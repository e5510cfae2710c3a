"""UI/CLI utilities for logging and formatting."""

from .formatting import color_text, format_percentage, render_bar
from .logging import (
    log_info,
    log_success,
    log_error,
    log_provenance,
)

__all__ = [
    "color_text",
    "format_percentage",
    "render_bar",
    "log_info",
    "log_success",
    "log_error",
    "log_provenance",
]
