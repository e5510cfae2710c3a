"""Heatmap data synthesis around a bullish/bearish bias."""

import random
from typing import List, Optional

from config.fx_chart_analyzer import DEFAULT_PROBABILITY, HEATMAP_CELLS, HEATMAP_NOISE_SPAN


def synthesize_heatmap(bullish_probability: float, rng: Optional[random.Random] = None) -> List[float]:
    """
    Generate heatmap cell values scattered around the bias implied by a probability.

    bias = (p - 50) / 50, and every cell is bias plus uniform noise in
    [-0.75, 0.75], clamped to [-1, 1]. The values do not come from the image.

    Args:
        bullish_probability: Bullish probability in 0..100
        rng: Random source (module-level random when None)

    Returns:
        List of HEATMAP_CELLS floats in [-1, 1]
    """
    rng = rng or random
    bias = (bullish_probability - DEFAULT_PROBABILITY) / DEFAULT_PROBABILITY

    data = []
    for _ in range(HEATMAP_CELLS):
        noise = (rng.random() - 0.5) * HEATMAP_NOISE_SPAN
        data.append(max(-1.0, min(1.0, bias + noise)))
    return data
