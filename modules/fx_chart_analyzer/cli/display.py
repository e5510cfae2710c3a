"""
Terminal rendering of analysis results.
"""

from typing import Any, Dict, List

from colorama import Fore, Style

from modules.common.ui.formatting import color_text, format_percentage, render_bar
from modules.fx_chart_analyzer.core.display import (
    HEATMAP_COLUMNS,
    REPORT_SECTIONS,
    SENTIMENT_LABELS,
    format_analysis_result,
    sentiment_band,
)

_BAND_COLORS = {
    "bullish": Fore.GREEN,
    "bearish": Fore.RED,
    "neutral": Fore.CYAN,
}


def _heatmap_cell(value: float) -> str:
    if value > 0:
        color = Fore.GREEN
    elif value < 0:
        color = Fore.RED
    else:
        color = Fore.BLUE
    style = Style.BRIGHT if abs(value) >= 0.5 else Style.NORMAL
    return color_text("██", color, style)


def render_heatmap(heatmap_data: List[float], columns: int = HEATMAP_COLUMNS) -> List[str]:
    """Render heatmap values as rows of colored blocks."""
    rows = []
    for start in range(0, len(heatmap_data), columns):
        rows.append(" ".join(_heatmap_cell(v) for v in heatmap_data[start:start + columns]))
    return rows


def display_analysis(result: Dict[str, Any], currency_pair: str, timeframe: str) -> None:
    """
    Print a formatted analysis report.

    Args:
        result: Serialized AnalysisResult (AnalysisResult.to_dict())
        currency_pair: Analyzed currency pair
        timeframe: Analyzed timeframe
    """
    data = format_analysis_result(result)

    print()
    print(color_text("=" * 60, Fore.CYAN))
    print(color_text(f"AI ANALYSIS: {currency_pair} ({timeframe})", Fore.CYAN, Style.BRIGHT))
    print(color_text("=" * 60, Fore.CYAN))

    print(color_text("\nProbability", Fore.WHITE, Style.BRIGHT))
    bullish = data["bullishProbability"]
    bearish = data["bearishProbability"]
    print(f"  Bullish {color_text(render_bar(bullish), Fore.GREEN)} {format_percentage(bullish)}")
    print(f"  Bearish {color_text(render_bar(bearish), Fore.RED)} {format_percentage(bearish)}")

    print(color_text("\nHeatmap", Fore.WHITE, Style.BRIGHT))
    for row in render_heatmap(data["heatmapData"]):
        print(f"  {row}")

    print(color_text("\nSentiment", Fore.WHITE, Style.BRIGHT))
    for key, label in SENTIMENT_LABELS.items():
        value = data["sentiment"][key]
        color = _BAND_COLORS[sentiment_band(value)]
        print(f"  {label:<10} {color_text(render_bar(value, width=20), color)} {format_percentage(value)}")

    for key, title in REPORT_SECTIONS:
        print(color_text(f"\n{title}", Fore.WHITE, Style.BRIGHT))
        print(f"  {data[key]}")

    print()
