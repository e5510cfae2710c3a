"""
Demo-mode analysis synthesizer.

Produces an AnalysisResult with the same shape as a parsed Gemini reply from
weighted random draws and template text. Used when no API key is configured
and whenever the remote path fails.
"""

import asyncio
import logging
import math
import random
from typing import Optional

from config.fx_chart_analyzer import DEMO_BULLISH_MIN, DEMO_BULLISH_SPAN, DEMO_DELAY_SECONDS
from modules.fx_chart_analyzer.core.heatmap import synthesize_heatmap
from modules.fx_chart_analyzer.core.models import AnalysisResult

logger = logging.getLogger(__name__)

CHART_PATTERNS = [
    "a rebound near the support line",
    "selling pressure capping price at the resistance line",
    "early signs of a double bottom",
    "a possible head and shoulders formation",
    "a golden cross on the moving averages",
    "a Bollinger Band squeeze turning into an expansion",
]


def _round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3), unlike round()."""
    return int(math.floor(value + 0.5))


def _split_pair(currency_pair: str):
    base, _, quote = currency_pair.partition("/")
    return base, quote


class DemoAnalysisSynthesizer:
    """Fabricate plausible chart analyses without calling a model."""

    def __init__(self, delay: float = DEMO_DELAY_SECONDS, rng: Optional[random.Random] = None):
        """
        Args:
            delay: Seconds to wait before resolving, mimicking model latency
            rng: Random source (module-level random when None)
        """
        self.delay = delay
        self.rng = rng or random

    def build_result(self, currency_pair: str, timeframe: str) -> AnalysisResult:
        """Draw a new simulated result immediately (no delay)."""
        rng = self.rng
        bullish = _round_half_up(DEMO_BULLISH_MIN + rng.random() * DEMO_BULLISH_SPAN)
        bearish = 100 - bullish
        is_bullish = bullish > 50

        trend = "an uptrend" if is_bullish else "a downtrend"
        action = "Long" if is_bullish else "Short"
        pattern = CHART_PATTERNS[int(rng.random() * len(CHART_PATTERNS))]
        base, quote = _split_pair(currency_pair)

        if is_bullish:
            exit_plan = "Target the most recent high and place the stop loss below the recent low."
        else:
            exit_plan = "Target the most recent low and place the stop loss above the recent high."

        return AnalysisResult(
            bullish_probability=bullish,
            bearish_probability=bearish,
            technical_analysis=(
                f"The current {currency_pair} chart ({timeframe}) shows {trend}. "
                f"In particular there is {pattern}, giving a technical turning-point or continuation signal. "
                f"The reaction after touching the nearest support line points to a possible double bottom, "
                f"and RSI indicates a corrective phase with overheating easing."
            ),
            fundamental_analysis=(
                f"Key {base} economic indicators have beaten market expectations and real-demand flows remain firm. "
                f"Hawkish central bank comments are supporting the currency. "
                f"{quote} meanwhile shows risk-off moves as geopolitical risk rises."
            ),
            recommendation=(
                f"{action} recommended. Entries near the support line are preferred. {exit_plan} "
                f"The levels allow a risk/reward ratio of 1:2 or better."
            ),
            risks=(
                "Watch for sudden moves on unexpected remarks from officials. "
                "Consider spread widening during low-liquidity hours, "
                "and beware of stop hunting through fakeouts."
            ),
            sentiment={
                "economic": 40 + _round_half_up(rng.random() * 30),
                "market": 35 + _round_half_up(rng.random() * 35),
                "technical": bullish,
                "news": 45 + _round_half_up(rng.random() * 20),
            },
            heatmap_data=synthesize_heatmap(bullish, rng=rng),
        )

    async def synthesize(self, currency_pair: str, timeframe: str) -> AnalysisResult:
        """
        Resolve a simulated analysis after the configured delay.

        Every call redraws all random values; nothing is cached.
        """
        logger.info("Demo mode: simulating analysis for %s %s", currency_pair or "-", timeframe or "-")
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        return self.build_result(currency_pair, timeframe)
