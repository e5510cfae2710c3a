"""Prompt construction for Gemini chart analysis."""


def build_prompt(currency_pair: str, timeframe: str) -> str:
    """
    Build the analysis instruction sent alongside the chart image.

    Any string is accepted for both arguments; they are interpolated as-is.

    Args:
        currency_pair: Currency pair shown on the chart (e.g., 'USD/JPY')
        timeframe: Chart timeframe (e.g., '1H')

    Returns:
        Prompt text asking for a strict JSON reply
    """
    return f"""You are a professional FX trader and market analyst. Analyze the attached chart image.

Currency pair: {currency_pair}
Timeframe: {timeframe}

Reply in JSON using exactly this structure:
{{
  "bullishProbability": probability of an upward move (number 0-100),
  "bearishProbability": probability of a downward move (number 0-100),
  "technicalAnalysis": "Detailed technical analysis: concrete chart patterns (e.g. 'a double bottom may form if price touches the support line'), moving averages, RSI and other indicators",
  "fundamentalAnalysis": "Fundamental view: economic indicators, monetary policy, geopolitical risk",
  "recommendation": "Recommended action (long / short / wait) and the concrete reason (e.g. 'aiming for a rebound near the support line')",
  "risks": "Main risk factors and points of caution",
  "sentiment": {{
    "economic": how positive the economic indicators are (0-100),
    "market": how positive market psychology is (0-100),
    "technical": how bullish the technical indicators are (0-100),
    "news": how positive news sentiment is (0-100)
  }}
}}

Return only the JSON. Do not wrap it in a markdown code block."""
