"""
Display helpers shared by the CLI and web surfaces.

These only map an analysis result onto presentation values (fallback labels,
heatmap cell colors, sentiment bands, live chart widget settings).
"""

import math
from typing import Any, Dict, Optional, Tuple

from config.fx_chart_analyzer import (
    DEFAULT_PROBABILITY,
    DEFAULT_SENTIMENT,
    SENTIMENT_BEARISH_THRESHOLD,
    SENTIMENT_BULLISH_THRESHOLD,
)

NOT_AVAILABLE = "N/A"

SENTIMENT_LABELS = {
    "economic": "Economic",
    "market": "Market",
    "technical": "Technical",
    "news": "News",
}

REPORT_SECTIONS = [
    ("technicalAnalysis", "Technical Analysis"),
    ("fundamentalAnalysis", "Fundamental Analysis"),
    ("recommendation", "Recommended Action"),
    ("risks", "Risk Factors"),
]

HEATMAP_COLUMNS = 7


def _score(value: Any, default: float) -> float:
    # Falsy, non-numeric and non-finite scores display as the default.
    if not value or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number):
        return default
    return value if isinstance(value, (int, float)) else number


def format_analysis_result(result: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fill display defaults into a serialized analysis result.

    Unlike the reply parser, every sentiment sub-field is defaulted on its own.
    Falsy values (including 0) are treated as missing, as are scores that are
    not finite numbers.
    """
    sentiment = result.get("sentiment") or {}
    if not isinstance(sentiment, dict):
        sentiment = {}
    return {
        "bullishProbability": _score(result.get("bullishProbability"), DEFAULT_PROBABILITY),
        "bearishProbability": _score(result.get("bearishProbability"), DEFAULT_PROBABILITY),
        "technicalAnalysis": result.get("technicalAnalysis") or NOT_AVAILABLE,
        "fundamentalAnalysis": result.get("fundamentalAnalysis") or NOT_AVAILABLE,
        "recommendation": result.get("recommendation") or NOT_AVAILABLE,
        "risks": result.get("risks") or NOT_AVAILABLE,
        "heatmapData": result.get("heatmapData") or [],
        "sentiment": {key: _score(sentiment.get(key), default) for key, default in DEFAULT_SENTIMENT.items()},
    }


def heatmap_cell_color(value: float) -> Tuple[float, float, float]:
    """
    Map a heatmap value in [-1, 1] to an HSL color.

    Returns:
        (hue, saturation %, lightness %): green for bullish, red for bearish,
        muted blue for exactly neutral
    """
    if value > 0:
        return 142, 60 + value * 20, 30 + value * 20
    if value < 0:
        return 0, 60 + abs(value) * 20, 30 + abs(value) * 20
    return 200, 20, 20


def sentiment_band(value: float) -> str:
    """Classify a 0-100 sentiment score as 'bullish', 'bearish' or 'neutral'."""
    if value >= SENTIMENT_BULLISH_THRESHOLD:
        return "bullish"
    if value <= SENTIMENT_BEARISH_THRESHOLD:
        return "bearish"
    return "neutral"


def to_tradingview_symbol(currency_pair: str) -> str:
    """Convert 'USD/JPY' to the TradingView symbol 'FX:USDJPY'."""
    return "FX:" + currency_pair.replace("/", "", 1)


class LiveChart:
    """
    Settings for the embedded live price chart.

    Each instance owns the widget configuration it last built; callers pass the
    instance to whatever needs to refresh the display.
    """

    def __init__(self, container_id: str = "tradingview-widget-container", interval: str = "60"):
        self.container_id = container_id
        self.interval = interval
        self.widget_config: Optional[Dict[str, Any]] = None

    def update(self, currency_pair: str) -> Dict[str, Any]:
        """Rebuild the widget configuration for a new currency pair."""
        self.widget_config = {
            "autosize": True,
            "symbol": to_tradingview_symbol(currency_pair),
            "interval": self.interval,
            "timezone": "Asia/Tokyo",
            "theme": "dark",
            "style": "1",
            "locale": "en",
            "enable_publishing": False,
            "hide_top_toolbar": False,
            "hide_legend": True,
            "save_image": False,
            "container_id": self.container_id,
            "backgroundColor": "rgba(13, 15, 18, 1)",
            "gridColor": "rgba(255, 255, 255, 0.05)",
            "allow_symbol_change": False,
        }
        return self.widget_config
