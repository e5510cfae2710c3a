"""Custom exceptions for the fx_chart_analyzer module."""

from typing import Optional


class FxChartAnalyzerError(Exception):
    """Base exception for all errors in the fx_chart_analyzer module."""

    pass


class ImageValidationError(FxChartAnalyzerError):
    """Raised when a chart image is missing, unreadable or outside the configured limits."""

    pass


class RemoteCallError(FxChartAnalyzerError):
    """Base exception for failures on the Gemini remote path."""

    reason = "remote call failed"


class ConfigurationAbsentError(RemoteCallError):
    """Raised when no Gemini credential is configured (demo mode)."""

    reason = "no API key configured"


class TransportError(RemoteCallError):
    """Raised when the Gemini call fails or returns a non-success status."""

    reason = "transport failure"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedReplyError(RemoteCallError):
    """Raised when the Gemini reply cannot be extracted or parsed."""

    reason = "malformed reply"


class InvalidRequestError(RemoteCallError):
    """Raised when the request cannot be packaged for Gemini (missing fields, bad image payload)."""

    reason = "invalid request"
