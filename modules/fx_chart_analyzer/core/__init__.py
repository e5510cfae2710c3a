"""Core analysis pipeline: prompt building, Gemini calls, reply parsing and demo synthesis."""

from modules.fx_chart_analyzer.core.demo_synthesizer import DemoAnalysisSynthesizer
from modules.fx_chart_analyzer.core.exceptions import (
    ConfigurationAbsentError,
    FxChartAnalyzerError,
    ImageValidationError,
    InvalidRequestError,
    MalformedReplyError,
    RemoteCallError,
    TransportError,
)
from modules.fx_chart_analyzer.core.gemini_client import GeminiChartClient
from modules.fx_chart_analyzer.core.heatmap import synthesize_heatmap
from modules.fx_chart_analyzer.core.models import AnalysisOutcome, AnalysisRequest, AnalysisResult, Provenance
from modules.fx_chart_analyzer.core.pipeline import ChartAnalysisPipeline, analyze_chart
from modules.fx_chart_analyzer.core.prompts import build_prompt
from modules.fx_chart_analyzer.core.response_parser import parse_analysis_response

__all__ = [
    "AnalysisOutcome",
    "AnalysisRequest",
    "AnalysisResult",
    "ChartAnalysisPipeline",
    "ConfigurationAbsentError",
    "DemoAnalysisSynthesizer",
    "FxChartAnalyzerError",
    "GeminiChartClient",
    "ImageValidationError",
    "InvalidRequestError",
    "MalformedReplyError",
    "Provenance",
    "RemoteCallError",
    "TransportError",
    "analyze_chart",
    "build_prompt",
    "parse_analysis_response",
    "synthesize_heatmap",
]
