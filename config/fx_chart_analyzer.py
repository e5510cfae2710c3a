"""
Configuration for FX Chart Analyzer module.

Default settings for the Gemini request, demo-mode synthesis and image validation.
"""

# Gemini model used for chart analysis
GEMINI_MODEL_NAME = "gemini-2.0-flash"

# Generation parameters sent with every request (not caller-configurable)
GENERATION_CONFIG = {
    "temperature": 0.7,
    "top_k": 40,
    "top_p": 0.95,
    "max_output_tokens": 2048,
}

# Retry settings for transient Gemini errors
MAX_RETRIES = 2
RETRY_BASE_DELAY = 1.0  # seconds, doubled on every attempt
RETRYABLE_STATUS_CODES = (429, 503)

# Heatmap grid (7 columns x 4 rows)
HEATMAP_CELLS = 28
HEATMAP_NOISE_SPAN = 1.5  # perturbation drawn from [-0.75, 0.75]

# Neutral defaults used when a field is missing from the reply
DEFAULT_PROBABILITY = 50
DEFAULT_SENTIMENT = {
    "economic": 50,
    "market": 50,
    "technical": 50,
    "news": 50,
}

# Demo-mode "thinking" period before a synthesized result resolves
DEMO_DELAY_SECONDS = 2.0

# Demo-mode probability range: round(35 + rand() * 30)
DEMO_BULLISH_MIN = 35
DEMO_BULLISH_SPAN = 30

# Sentiment bands used by the display layer
SENTIMENT_BULLISH_THRESHOLD = 60
SENTIMENT_BEARISH_THRESHOLD = 40

# Uploaded chart image limits
IMAGE_VALIDATION_CONFIG = {
    "max_file_size_mb": 20.0,
    "max_width": 8192,
    "max_height": 8192,
    "supported_formats": ("PNG", "JPEG", "WEBP", "GIF"),
}
