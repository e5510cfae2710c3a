"""
CLI Main Program for FX Chart Analyzer

Workflow:
1. Read the chart image, currency pair and timeframe from the command line
2. Send the image to Google Gemini using the API key from config/config_api.py
   (or synthesize a demo analysis when no key is configured)
3. Print the probabilities, heatmap, sentiment breakdown and report
"""

import asyncio
import json
import logging
from typing import List, Optional

from colorama import Fore
from colorama import init as colorama_init

from modules.common.ui.formatting import color_text
from modules.common.ui.logging import log_error, log_info, log_provenance, log_success
from modules.fx_chart_analyzer.cli.argument_parser import parse_args
from modules.fx_chart_analyzer.cli.display import display_analysis
from modules.fx_chart_analyzer.core.demo_synthesizer import DemoAnalysisSynthesizer
from modules.fx_chart_analyzer.core.exceptions import ImageValidationError
from modules.fx_chart_analyzer.core.gemini_client import GeminiChartClient
from modules.fx_chart_analyzer.core.image_payload import load_image_as_data_url
from modules.fx_chart_analyzer.core.models import AnalysisRequest
from modules.fx_chart_analyzer.core.pipeline import ChartAnalysisPipeline


def build_pipeline(api_key: Optional[str], demo: bool, demo_delay: float) -> ChartAnalysisPipeline:
    """Create the analysis pipeline for the CLI options."""
    # An empty key leaves the client unconfigured, which routes to demo mode.
    client = GeminiChartClient(api_key="" if demo else api_key)
    synthesizer = DemoAnalysisSynthesizer(delay=demo_delay)
    return ChartAnalysisPipeline(client=client, synthesizer=synthesizer)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for FX Chart Analyzer. Returns the process exit code."""
    colorama_init()
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    args = parse_args(argv)

    if not args.json:
        print()
        print(color_text("=" * 60, Fore.CYAN))
        print(color_text("FX CHART ANALYZER", Fore.CYAN))
        print(color_text("=" * 60, Fore.CYAN))

    try:
        image = load_image_as_data_url(args.image)
    except ImageValidationError as e:
        log_error(f"Invalid chart image: {e}")
        return 1

    pipeline = build_pipeline(args.api_key, args.demo, args.demo_delay)
    request = AnalysisRequest(image=image, currency_pair=args.pair, timeframe=args.timeframe)

    if not args.json:
        log_info(f"Analyzing {args.pair} ({args.timeframe})...")

    outcome = asyncio.run(pipeline.analyze_with_provenance(request))

    if args.json:
        print(json.dumps(outcome.result.to_dict(), ensure_ascii=False, indent=2))
        return 0

    log_success("Analysis complete")
    log_provenance(outcome.provenance.value, outcome.fallback_reason or "")
    display_analysis(outcome.result.to_dict(), args.pair, args.timeframe)
    return 0
