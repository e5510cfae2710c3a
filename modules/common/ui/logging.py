"""
Logging functions organized by severity level and purpose.
"""

from colorama import Fore, Style

from modules.common.ui.formatting import color_text


# Standard severity levels
def log_info(msg: str) -> None:
    """Print informational message with blue color."""
    print(color_text(msg, Fore.BLUE))


def log_success(msg: str) -> None:
    """Print success message with green color."""
    print(color_text(msg, Fore.GREEN))


def log_error(msg: str) -> None:
    """Print error message with red color and bright style."""
    print(color_text(msg, Fore.RED, Style.BRIGHT))


# Domain-specific logging
def log_provenance(provenance: str, reason: str = "") -> None:
    """Print where an analysis result came from (remote model or demo synthesizer)."""
    if provenance == "remote":
        print(color_text("Source: Gemini model", Fore.GREEN))
        return
    suffix = f" ({reason})" if reason else ""
    print(color_text(f"Source: demo synthesizer{suffix}", Fore.YELLOW, Style.BRIGHT))
