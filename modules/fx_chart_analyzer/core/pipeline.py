"""
Chart analysis pipeline.

Turns an AnalysisRequest into an AnalysisResult. The remote path builds the
prompt, calls Gemini and parses the reply; any RemoteCallError on that path
(including a missing API key) falls back to the demo synthesizer, so analyze()
always resolves to a valid result.
"""

import logging
from typing import Optional

from modules.fx_chart_analyzer.core.demo_synthesizer import DemoAnalysisSynthesizer
from modules.fx_chart_analyzer.core.exceptions import (
    ConfigurationAbsentError,
    InvalidRequestError,
    MalformedReplyError,
    RemoteCallError,
    TransportError,
)
from modules.fx_chart_analyzer.core.gemini_client import GeminiChartClient
from modules.fx_chart_analyzer.core.image_payload import split_data_url
from modules.fx_chart_analyzer.core.models import (
    AnalysisOutcome,
    AnalysisRequest,
    AnalysisResult,
    Provenance,
)
from modules.fx_chart_analyzer.core.prompts import build_prompt
from modules.fx_chart_analyzer.core.response_parser import parse_analysis_response

logger = logging.getLogger(__name__)


class ChartAnalysisPipeline:
    """Acquire and normalize a chart analysis from Gemini or the demo synthesizer."""

    def __init__(
        self,
        client: Optional[GeminiChartClient] = None,
        synthesizer: Optional[DemoAnalysisSynthesizer] = None,
    ):
        """
        Args:
            client: Gemini client (built from config when None)
            synthesizer: Demo-mode synthesizer (default delay when None)
        """
        self.client = client if client is not None else GeminiChartClient()
        self.synthesizer = synthesizer if synthesizer is not None else DemoAnalysisSynthesizer()

    async def _analyze_remote(self, request: AnalysisRequest) -> AnalysisResult:
        if not self.client.is_configured:
            raise ConfigurationAbsentError("GEMINI_API_KEY not provided")
        if not request.is_complete():
            raise InvalidRequestError("Image, currency pair and timeframe are required for a remote call")

        try:
            image_base64, mime_type = split_data_url(request.image)
            prompt = build_prompt(request.currency_pair, request.timeframe)
        except ValueError as exc:
            raise InvalidRequestError(f"Cannot package image: {exc}") from exc
        except Exception as exc:
            logger.exception("Unexpected error while building the Gemini request")
            raise InvalidRequestError(f"Cannot build request: {exc}") from exc

        try:
            raw_text = await self.client.invoke(prompt, image_base64, mime_type)
        except RemoteCallError:
            raise
        except Exception as exc:
            logger.exception("Unexpected error while calling Gemini")
            raise TransportError(f"Gemini request failed: {exc}") from exc

        try:
            return parse_analysis_response(raw_text)
        except MalformedReplyError:
            raise
        except Exception as exc:
            logger.exception("Unexpected error while parsing the Gemini reply")
            raise MalformedReplyError(f"Cannot parse reply: {exc}") from exc

    async def analyze_with_provenance(self, request: AnalysisRequest) -> AnalysisOutcome:
        """
        Analyze a chart and report whether the result is genuine or simulated.

        Never raises for remote-path failures.
        """
        try:
            result = await self._analyze_remote(request)
        except ConfigurationAbsentError as e:
            logger.info(f"Demo mode: {e}")
            reason = e.reason
        except RemoteCallError as e:
            logger.warning(f"AI analysis failed ({e.reason}): {e}. Falling back to simulated analysis")
            reason = e.reason
        else:
            return AnalysisOutcome(provenance=Provenance.REMOTE, result=result)

        result = await self.synthesizer.synthesize(request.currency_pair, request.timeframe)
        return AnalysisOutcome(provenance=Provenance.SIMULATED, result=result, fallback_reason=reason)

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Analyze a chart; always resolves to a valid AnalysisResult."""
        outcome = await self.analyze_with_provenance(request)
        return outcome.result


async def analyze_chart(
    image: str,
    currency_pair: str,
    timeframe: str,
    pipeline: Optional[ChartAnalysisPipeline] = None,
) -> AnalysisResult:
    """
    Analyze a chart image for a currency pair and timeframe.

    Args:
        image: Chart image as a base64 data URL
        currency_pair: Currency pair (e.g., 'EUR/USD')
        timeframe: Chart timeframe (e.g., '4H')
        pipeline: Pipeline to use (a default one is built when None)

    Returns:
        AnalysisResult from Gemini, or a simulated one if Gemini is unavailable
    """
    pipeline = pipeline or ChartAnalysisPipeline()
    return await pipeline.analyze(AnalysisRequest(image=image, currency_pair=currency_pair, timeframe=timeframe))
