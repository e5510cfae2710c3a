"""
Text formatting utilities for terminal output.
"""

from colorama import Fore, Style


def color_text(text: str, color: str = Fore.WHITE, style: str = Style.NORMAL) -> str:
    """
    Applies color and style to text using colorama.

    Args:
        text: Text to format
        color: Colorama Fore color (default: Fore.WHITE)
        style: Colorama Style (default: Style.NORMAL)

    Returns:
        Formatted text string with color and style codes
    """
    return f"{style}{color}{text}{Style.RESET_ALL}"


def format_percentage(value) -> str:
    """
    Formats a 0-100 score as a percentage label.

    Args:
        value: Numeric score

    Returns:
        Percentage string (e.g. "62%"), or "N/A" if value is None
    """
    if value is None:
        return "N/A"
    return f"{round(value)}%"


def render_bar(value: float, width: int = 30, fill: str = "█", empty: str = "░") -> str:
    """
    Render a 0-100 value as a fixed-width horizontal bar.

    Values outside the range are clamped.
    """
    ratio = max(0.0, min(100.0, float(value))) / 100.0
    filled = int(round(ratio * width))
    return fill * filled + empty * (width - filled)
