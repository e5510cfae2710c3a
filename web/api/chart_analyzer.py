"""
API routes for Chart Analyzer (chart image upload and analysis).
"""

import logging
from typing import Dict, List, Union

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Response, UploadFile
from pydantic import BaseModel, Field

from config.forex_pairs import (
    CURRENCY_PAIRS,
    TIMEFRAMES,
    is_supported_currency_pair,
    is_supported_timeframe,
)
from modules.fx_chart_analyzer.core.display import LiveChart, format_analysis_result
from modules.fx_chart_analyzer.core.exceptions import ImageValidationError
from modules.fx_chart_analyzer.core.image_payload import image_bytes_to_data_url
from modules.fx_chart_analyzer.core.models import AnalysisRequest
from modules.fx_chart_analyzer.core.pipeline import ChartAnalysisPipeline

logger = logging.getLogger(__name__)

router = APIRouter()

PROVENANCE_HEADER = "X-Analysis-Provenance"


# Response models
class SentimentModel(BaseModel):
    """Sentiment breakdown (0-100 per category)."""
    economic: Union[int, float] = Field(default=50, description="Economic indicators")
    market: Union[int, float] = Field(default=50, description="Market psychology")
    technical: Union[int, float] = Field(default=50, description="Technical indicators")
    news: Union[int, float] = Field(default=50, description="News sentiment")


class AnalysisResponse(BaseModel):
    """Analysis result returned to the browser."""
    bullishProbability: int
    bearishProbability: int
    technicalAnalysis: str
    fundamentalAnalysis: str
    recommendation: str
    risks: str
    sentiment: SentimentModel
    heatmapData: List[float]


class OptionModel(BaseModel):
    """Selectable option (currency pair or timeframe)."""
    value: str
    label: str


_pipeline = None


def get_pipeline() -> ChartAnalysisPipeline:
    """Return the shared analysis pipeline (created on first use)."""
    global _pipeline
    if _pipeline is None:
        _pipeline = ChartAnalysisPipeline()
    return _pipeline


@router.get("/currency-pairs", response_model=List[OptionModel])
async def list_currency_pairs():
    """List the currency pairs offered for analysis."""
    return CURRENCY_PAIRS


@router.get("/timeframes", response_model=List[OptionModel])
async def list_timeframes():
    """List the chart timeframes offered for analysis."""
    return TIMEFRAMES


@router.get("/live-chart")
async def live_chart_config(currency_pair: str = Query(..., description="Currency pair (e.g., USD/JPY)")) -> Dict:
    """Widget settings for the embedded live chart of a currency pair."""
    if not is_supported_currency_pair(currency_pair):
        raise HTTPException(status_code=400, detail=f"Unsupported currency pair: {currency_pair}")
    return LiveChart().update(currency_pair)


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(
    response: Response,
    file: UploadFile = File(..., description="Chart image"),
    currency_pair: str = Form(..., description="Currency pair (e.g., USD/JPY)"),
    timeframe: str = Form(..., description="Timeframe (e.g., 1H)"),
    pipeline: ChartAnalysisPipeline = Depends(get_pipeline),
):
    """
    Analyze an uploaded chart image.

    Always returns an analysis: if Gemini is not configured or fails, a
    simulated analysis is returned instead. The X-Analysis-Provenance header
    tells which one it is. Missing or unusable fields are filled with their
    display defaults.
    """
    if not is_supported_currency_pair(currency_pair):
        raise HTTPException(status_code=400, detail=f"Unsupported currency pair: {currency_pair}")
    if not is_supported_timeframe(timeframe):
        raise HTTPException(status_code=400, detail=f"Unsupported timeframe: {timeframe}")
    if not (file.content_type or "").startswith("image/"):
        raise HTTPException(status_code=400, detail="Please upload an image file")

    image_bytes = await file.read()
    try:
        image = image_bytes_to_data_url(image_bytes)
    except ImageValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    request = AnalysisRequest(image=image, currency_pair=currency_pair, timeframe=timeframe)
    outcome = await pipeline.analyze_with_provenance(request)

    logger.info(f"Analysis for {currency_pair} {timeframe} served from {outcome.provenance.value}")
    response.headers[PROVENANCE_HEADER] = outcome.provenance.value
    return format_analysis_result(outcome.result.to_dict())
