"""
FX Chart Analyzer Module

This module turns a forex chart screenshot into an AI market commentary using Google Gemini:
- Build a strict-JSON analysis prompt for a currency pair and timeframe
- Send the chart image inline to Gemini and parse the reply
- Fall back to a demo-mode synthesizer when no API key is configured or Gemini fails
- Synthesize heatmap data around the bullish/bearish bias
"""

from modules.fx_chart_analyzer.core.demo_synthesizer import DemoAnalysisSynthesizer
from modules.fx_chart_analyzer.core.gemini_client import GeminiChartClient
from modules.fx_chart_analyzer.core.models import AnalysisRequest, AnalysisResult
from modules.fx_chart_analyzer.core.pipeline import ChartAnalysisPipeline, analyze_chart

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "ChartAnalysisPipeline",
    "DemoAnalysisSynthesizer",
    "GeminiChartClient",
    "analyze_chart",
]
