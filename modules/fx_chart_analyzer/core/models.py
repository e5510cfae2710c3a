"""
Data models for chart analysis requests and results.

AnalysisResult.to_dict() emits the camelCase keys consumed by the display layer
and the web API.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from config.fx_chart_analyzer import DEFAULT_PROBABILITY, DEFAULT_SENTIMENT


def default_sentiment() -> Dict[str, int]:
    """Return a fresh all-neutral sentiment record."""
    return dict(DEFAULT_SENTIMENT)


@dataclass
class AnalysisRequest:
    """A chart image plus the context it should be analyzed in."""

    image: str  # data URL: data:<mime>;base64,<payload>
    currency_pair: str
    timeframe: str

    def is_complete(self) -> bool:
        """All three fields are required for a real remote call."""
        return bool(self.image and self.currency_pair and self.timeframe)


@dataclass
class AnalysisResult:
    bullish_probability: int = DEFAULT_PROBABILITY
    bearish_probability: int = DEFAULT_PROBABILITY
    technical_analysis: str = ""
    fundamental_analysis: str = ""
    recommendation: str = ""
    risks: str = ""
    sentiment: Dict[str, int] = field(default_factory=default_sentiment)
    heatmap_data: List[float] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "bullishProbability": self.bullish_probability,
            "bearishProbability": self.bearish_probability,
            "technicalAnalysis": self.technical_analysis,
            "fundamentalAnalysis": self.fundamental_analysis,
            "recommendation": self.recommendation,
            "risks": self.risks,
            "sentiment": dict(self.sentiment),
            "heatmapData": list(self.heatmap_data),
        }


class Provenance(str, Enum):
    """Where an analysis result came from."""

    REMOTE = "remote"
    SIMULATED = "simulated"


@dataclass
class AnalysisOutcome:
    """
    An analysis result tagged with its provenance.

    The caller-facing contract only exposes `result`; provenance and the
    fallback reason are kept for logging and diagnostics.
    """

    provenance: Provenance
    result: AnalysisResult
    fallback_reason: Optional[str] = None

    @property
    def is_simulated(self) -> bool:
        return self.provenance == Provenance.SIMULATED
