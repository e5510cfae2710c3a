"""
Gemini client for analyzing chart images.

Sends the prompt and the inline chart image to Google Gemini and returns the
reply text. Every failure is raised as a RemoteCallError subclass so the
pipeline can fall back to the demo synthesizer.
"""

import asyncio
import base64
import binascii
import logging
from typing import Any, Optional

from google import genai
from google.genai import errors, types

from config.fx_chart_analyzer import (
    GEMINI_MODEL_NAME,
    GENERATION_CONFIG,
    MAX_RETRIES,
    RETRY_BASE_DELAY,
    RETRYABLE_STATUS_CODES,
)
from modules.fx_chart_analyzer.core.exceptions import (
    ConfigurationAbsentError,
    InvalidRequestError,
    MalformedReplyError,
    TransportError,
)

logger = logging.getLogger(__name__)


def _field(obj: Any, name: str) -> Any:
    """Read a field from either a JSON dict or an SDK response object."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_reply_text(response: Any) -> str:
    """
    Extract candidates[0].content.parts[0].text from a Gemini response envelope.

    Raises:
        MalformedReplyError: If the envelope does not have that shape
    """
    candidates = _field(response, "candidates")
    if not candidates:
        raise MalformedReplyError("Gemini response has no candidates")

    content = _field(candidates[0], "content")
    parts = _field(content, "parts") if content is not None else None
    if not parts:
        raise MalformedReplyError("Gemini response candidate has no content parts")

    text = _field(parts[0], "text")
    if not isinstance(text, str):
        raise MalformedReplyError("Gemini response part has no text")
    return text


def build_generation_config() -> types.GenerateContentConfig:
    """Fixed generation parameters for chart analysis."""
    return types.GenerateContentConfig(**GENERATION_CONFIG)


def build_contents(prompt: str, image_base64: str, mime_type: str) -> list:
    """
    Package the prompt and inline image as a single user turn.

    Raises:
        InvalidRequestError: If the image payload is not valid base64
    """
    try:
        image_bytes = base64.b64decode(image_base64, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidRequestError(f"Image payload is not valid base64: {exc}") from exc

    return [
        types.Content(
            role="user",
            parts=[
                types.Part.from_text(text=prompt),
                types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
            ],
        )
    ]


class GeminiChartClient:
    """Call Google Gemini with a chart image and return the raw reply text."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: str = GEMINI_MODEL_NAME,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_BASE_DELAY,
    ):
        """
        Initialize GeminiChartClient.

        Args:
            api_key: Google Gemini API key (if None, will load from config)
            model_name: Gemini model to call
            max_retries: Extra attempts for rate-limit/unavailable responses
            retry_delay: Base delay in seconds, doubled on each retry
        """
        if api_key is None:
            from config.config_api import GEMINI_API_KEY

            api_key = GEMINI_API_KEY

        self.model_name = model_name
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.client = genai.Client(api_key=api_key) if api_key else None

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    async def _generate(self, contents: list) -> Any:
        for attempt in range(self.max_retries + 1):
            try:
                return await self.client.aio.models.generate_content(
                    model=self.model_name,
                    contents=contents,
                    config=build_generation_config(),
                )
            except errors.APIError as e:
                status_code = getattr(e, "code", None)
                if status_code in RETRYABLE_STATUS_CODES and attempt < self.max_retries:
                    wait_time = self.retry_delay * (2 ** attempt)
                    logger.warning(
                        f"Retryable error from {self.model_name} (status {status_code}), "
                        f"attempt {attempt + 1}/{self.max_retries + 1}. Waiting {wait_time}s before retrying"
                    )
                    await asyncio.sleep(wait_time)
                    continue
                raise TransportError(f"Gemini API error: {status_code}", status_code=status_code) from e
            except Exception as e:
                raise TransportError(f"Gemini request failed: {e}") from e

    async def invoke(self, prompt: str, image_base64: str, mime_type: str) -> str:
        """
        Send prompt and image to Gemini and return the reply text.

        Raises:
            ConfigurationAbsentError: If no API key is configured
            InvalidRequestError: If the image payload is not valid base64
            TransportError: If the call fails or returns a non-success status
            MalformedReplyError: If the response envelope has no text part
        """
        if not self.is_configured:
            raise ConfigurationAbsentError("GEMINI_API_KEY not provided")

        contents = build_contents(prompt, image_base64, mime_type)
        logger.info(f"Sending chart to {self.model_name}")
        response = await self._generate(contents)
        return extract_reply_text(response)
