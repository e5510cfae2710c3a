"""
Argument parser for FX Chart Analyzer CLI.
"""

import argparse
from typing import List, Optional

from config.forex_pairs import (
    CURRENCY_PAIR_VALUES,
    DEFAULT_CURRENCY_PAIR,
    DEFAULT_TIMEFRAME,
    TIMEFRAME_VALUES,
)
from config.fx_chart_analyzer import DEMO_DELAY_SECONDS


def _currency_pair(value: str) -> str:
    return value.strip().upper()


def _timeframe(value: str) -> str:
    return value.strip().upper()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for FX Chart Analyzer.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        argparse.Namespace with image, pair, timeframe, api_key, demo, demo_delay, json
    """
    parser = argparse.ArgumentParser(
        description="FX Chart Analyzer - AI market commentary for forex chart screenshots using Google Gemini",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main_fx_chart_analyzer.py --image chart.png --pair EUR/USD --timeframe 4H
  python main_fx_chart_analyzer.py --image chart.png --pair usd/jpy --timeframe 1h --json
  python main_fx_chart_analyzer.py --image chart.png --demo --demo-delay 0
        """,
    )

    parser.add_argument(
        "--image",
        type=str,
        required=True,
        help="Path to the chart image (PNG, JPEG, WEBP or GIF)",
    )
    parser.add_argument(
        "--pair",
        type=_currency_pair,
        choices=CURRENCY_PAIR_VALUES,
        default=DEFAULT_CURRENCY_PAIR,
        help=f"Currency pair (default: {DEFAULT_CURRENCY_PAIR})",
    )
    parser.add_argument(
        "--timeframe",
        type=_timeframe,
        choices=TIMEFRAME_VALUES,
        default=DEFAULT_TIMEFRAME,
        help=f"Chart timeframe (default: {DEFAULT_TIMEFRAME})",
    )

    # Gemini configuration
    parser.add_argument(
        "--api-key",
        type=str,
        default=None,
        help="Google Gemini API key (default: GEMINI_API_KEY environment variable)",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Skip Gemini and synthesize a demo analysis",
    )
    parser.add_argument(
        "--demo-delay",
        type=float,
        default=DEMO_DELAY_SECONDS,
        help=f"Seconds the demo synthesizer waits before answering (default: {DEMO_DELAY_SECONDS})",
    )

    # Output
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw analysis result as JSON instead of the formatted report",
    )

    args = parser.parse_args(argv)

    if args.demo_delay < 0:
        parser.error("--demo-delay must be >= 0")

    return args
