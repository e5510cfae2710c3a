"""Helpers for parsing Gemini replies into AnalysisResult objects."""

import json
import re
from typing import Any, Dict

from config.fx_chart_analyzer import DEFAULT_PROBABILITY
from modules.fx_chart_analyzer.core.exceptions import MalformedReplyError
from modules.fx_chart_analyzer.core.heatmap import synthesize_heatmap
from modules.fx_chart_analyzer.core.models import AnalysisResult, default_sentiment

_JSON_FENCE_RE = re.compile(r"```json\n?")
_FENCE_RE = re.compile(r"```\n?")

TEXT_FIELDS = {
    "technical_analysis": "technicalAnalysis",
    "fundamental_analysis": "fundamentalAnalysis",
    "recommendation": "recommendation",
    "risks": "risks",
}


def strip_code_fences(response_text: str) -> str:
    """Remove markdown code fence markers (```json / ```) and surrounding whitespace."""
    cleaned = _JSON_FENCE_RE.sub("", response_text)
    cleaned = _FENCE_RE.sub("", cleaned)
    return cleaned.strip()


def _probability(value: Any) -> int:
    # Falsy values (missing, None, 0, "") fall back to the neutral default.
    if not value:
        return DEFAULT_PROBABILITY
    if isinstance(value, bool):
        raise MalformedReplyError(f"Probability must be a finite number, got {value!r}")
    try:
        return int(round(float(value)))
    except (TypeError, ValueError, OverflowError) as exc:
        raise MalformedReplyError(f"Probability must be a finite number, got {value!r}") from exc


def _text(value: Any) -> str:
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def _sentiment(value: Any) -> Dict[str, Any]:
    # Only the whole record is defaulted; missing sub-fields are left to the display layer.
    if not value:
        return default_sentiment()
    if not isinstance(value, dict):
        raise MalformedReplyError(f"Sentiment must be an object, got {type(value).__name__}")
    return dict(value)


def parse_analysis_response(response_text: str) -> AnalysisResult:
    """
    Convert Gemini reply text into an AnalysisResult.

    Heatmap data is never read from the reply; it is regenerated from the
    resolved bullish probability.

    Args:
        response_text: Raw text returned by the model

    Returns:
        Parsed and defaulted AnalysisResult

    Raises:
        MalformedReplyError: If the text is not a JSON object after fence stripping
    """
    cleaned = strip_code_fences(response_text or "")

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedReplyError(f"Reply is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise MalformedReplyError("Reply is nested too deeply to decode") from exc

    if not isinstance(parsed, dict):
        raise MalformedReplyError(f"Reply must be a JSON object, got {type(parsed).__name__}")

    bullish = _probability(parsed.get("bullishProbability"))
    bearish = _probability(parsed.get("bearishProbability"))
    texts = {attr: _text(parsed.get(key)) for attr, key in TEXT_FIELDS.items()}

    return AnalysisResult(
        bullish_probability=bullish,
        bearish_probability=bearish,
        sentiment=_sentiment(parsed.get("sentiment")),
        heatmap_data=synthesize_heatmap(bullish),
        **texts,
    )
