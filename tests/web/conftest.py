"""
Shared fixtures for web module tests.
"""

import pytest
from fastapi.testclient import TestClient

from modules.fx_chart_analyzer.core.pipeline import ChartAnalysisPipeline
from web.api.chart_analyzer import get_pipeline
from web.app import app


@pytest.fixture
def client():
    """Create FastAPI TestClient instance."""
    return TestClient(app)


@pytest.fixture
def override_pipeline():
    """
    Install a pipeline for the analyze endpoint and remove it afterwards.

    Usage: override_pipeline(client=..., synthesizer=...)
    """
    def _install(client, synthesizer):
        pipeline = ChartAnalysisPipeline(client=client, synthesizer=synthesizer)
        app.dependency_overrides[get_pipeline] = lambda: pipeline
        return pipeline

    yield _install
    app.dependency_overrides.pop(get_pipeline, None)


@pytest.fixture
def demo_pipeline(override_pipeline, unconfigured_client, instant_synthesizer):
    """Analyze endpoint backed by the demo synthesizer only."""
    return override_pipeline(unconfigured_client, instant_synthesizer)
