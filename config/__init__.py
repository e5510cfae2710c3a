"""
Configuration package.

This package contains configuration constants and API keys for the chart analyzer.

The configuration is organized into separate modules:
- fx_chart_analyzer: Gemini request, demo-mode and image validation settings
- forex_pairs: Currency pairs and timeframes offered for analysis
- config_api: API keys and secrets
"""

from .fx_chart_analyzer import *  # noqa: F403, F401
from .forex_pairs import *  # noqa: F403, F401

# Import API configuration last
from .config_api import *  # noqa: F403, F401
