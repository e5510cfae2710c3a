"""
Forex pairs configuration.

Contains the currency pairs and chart timeframes offered by the chart analyzer.
"""

# Currency pairs available for analysis, in display order
CURRENCY_PAIRS = [
    {"value": "USD/JPY", "label": "USD/JPY (US Dollar / Japanese Yen)"},
    {"value": "EUR/USD", "label": "EUR/USD (Euro / US Dollar)"},
    {"value": "GBP/USD", "label": "GBP/USD (British Pound / US Dollar)"},
    {"value": "EUR/JPY", "label": "EUR/JPY (Euro / Japanese Yen)"},
    {"value": "GBP/JPY", "label": "GBP/JPY (British Pound / Japanese Yen)"},
    {"value": "AUD/USD", "label": "AUD/USD (Australian Dollar / US Dollar)"},
    {"value": "AUD/JPY", "label": "AUD/JPY (Australian Dollar / Japanese Yen)"},
    {"value": "NZD/USD", "label": "NZD/USD (New Zealand Dollar / US Dollar)"},
    {"value": "USD/CHF", "label": "USD/CHF (US Dollar / Swiss Franc)"},
    {"value": "USD/CAD", "label": "USD/CAD (US Dollar / Canadian Dollar)"},
    {"value": "EUR/GBP", "label": "EUR/GBP (Euro / British Pound)"},
    {"value": "EUR/AUD", "label": "EUR/AUD (Euro / Australian Dollar)"},
]

# Chart timeframes available for analysis
TIMEFRAMES = [
    {"value": "1M", "label": "1 minute"},
    {"value": "5M", "label": "5 minutes"},
    {"value": "15M", "label": "15 minutes"},
    {"value": "30M", "label": "30 minutes"},
    {"value": "1H", "label": "1 hour"},
    {"value": "4H", "label": "4 hours"},
    {"value": "1D", "label": "Daily"},
    {"value": "1W", "label": "Weekly"},
    {"value": "1MO", "label": "Monthly"},
]

DEFAULT_CURRENCY_PAIR = "USD/JPY"
DEFAULT_TIMEFRAME = "1H"

CURRENCY_PAIR_VALUES = [pair["value"] for pair in CURRENCY_PAIRS]
TIMEFRAME_VALUES = [tf["value"] for tf in TIMEFRAMES]


def is_supported_currency_pair(currency_pair: str) -> bool:
    """Check whether a currency pair is one of the offered pairs."""
    return currency_pair in CURRENCY_PAIR_VALUES


def is_supported_timeframe(timeframe: str) -> bool:
    """Check whether a timeframe is one of the offered timeframes."""
    return timeframe in TIMEFRAME_VALUES
