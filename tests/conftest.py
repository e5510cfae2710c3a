"""
Shared fixtures for FX Chart Analyzer tests.
"""

import io
import random
from unittest.mock import AsyncMock, Mock

import pytest
from PIL import Image

from modules.fx_chart_analyzer.core.demo_synthesizer import DemoAnalysisSynthesizer
from modules.fx_chart_analyzer.core.gemini_client import GeminiChartClient
from modules.fx_chart_analyzer.core.image_payload import encode_image_bytes


@pytest.fixture
def png_bytes():
    """A 1x1 pixel PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (1, 1), color="white").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_data_url(png_bytes):
    """The 1x1 PNG as a base64 data URL."""
    return encode_image_bytes(png_bytes, "image/png")


@pytest.fixture
def sample_image_path(tmp_path, png_bytes):
    """Write the 1x1 PNG to a temporary file."""
    image_path = tmp_path / "test_chart.png"
    image_path.write_bytes(png_bytes)
    return str(image_path)


@pytest.fixture
def seeded_rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def instant_synthesizer():
    """Demo synthesizer without the simulated delay."""
    return DemoAnalysisSynthesizer(delay=0)


@pytest.fixture
def unconfigured_client():
    """Gemini client without an API key (demo mode)."""
    return GeminiChartClient(api_key="")


@pytest.fixture
def configured_client_factory():
    """
    Factory for a mocked, configured Gemini client.

    The returned client's invoke() is an AsyncMock returning `reply_text`
    or raising `side_effect`.
    """
    def _create(reply_text=None, side_effect=None):
        client = Mock(spec=GeminiChartClient)
        client.is_configured = True
        client.invoke = AsyncMock(return_value=reply_text, side_effect=side_effect)
        return client

    return _create
