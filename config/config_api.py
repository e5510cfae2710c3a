"""
API Configuration for external services.

The Gemini key is read from the environment and never hardcoded here.
Without a key the analyzer runs in demo mode and synthesizes results locally.

Usage:
    export GEMINI_API_KEY='your-api-key-here'
    # or in PowerShell: $env:GEMINI_API_KEY='your-api-key-here'

Get a key from https://aistudio.google.com/app/apikey
"""

import os
from typing import Dict, Optional

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or None


def load_api_keys() -> Dict[str, Optional[str]]:
    """
    Re-read API keys from the environment and refresh the module attributes.

    Returns:
        Dict mapping key names to their values (None when unset or empty)
    """
    global GEMINI_API_KEY

    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or None
    return {"GEMINI_API_KEY": GEMINI_API_KEY}
