"""
Helpers for packaging chart images as inline Gemini payloads.

Images travel through the pipeline as data URLs (data:<mime>;base64,<payload>),
the same shape a browser FileReader produces for an uploaded file.
"""

import base64
import io
import os
from dataclasses import dataclass
from typing import Optional, Tuple

import PIL.Image

from config.fx_chart_analyzer import IMAGE_VALIDATION_CONFIG
from modules.fx_chart_analyzer.core.exceptions import ImageValidationError

# Pillow format name -> MIME type
_FORMAT_MIME_TYPES = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
    "WEBP": "image/webp",
    "GIF": "image/gif",
}


@dataclass
class ImageValidationConfig:
    """Configuration for validating chart images."""

    max_file_size_mb: float = IMAGE_VALIDATION_CONFIG["max_file_size_mb"]
    max_width: int = IMAGE_VALIDATION_CONFIG["max_width"]
    max_height: int = IMAGE_VALIDATION_CONFIG["max_height"]
    supported_formats: tuple = IMAGE_VALIDATION_CONFIG["supported_formats"]


def split_data_url(data_url: str) -> Tuple[str, str]:
    """
    Split a data URL into its base64 payload and MIME type.

    The payload is everything after the first ','; the MIME type is the text
    between ':' and the first ';'.

    Raises:
        ValueError: If the string is not a base64 data URL
    """
    header, sep, payload = data_url.partition(",")
    scheme, _, params = header.partition(":")
    mime_type, has_params, _ = params.partition(";")
    if not sep or scheme != "data" or not has_params or not mime_type:
        raise ValueError("Image is not a base64 data URL")
    return payload, mime_type


def encode_image_bytes(image_bytes: bytes, mime_type: str) -> str:
    """Build a base64 data URL from raw image bytes."""
    payload = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def detect_mime_type(image_bytes: bytes, config: Optional[ImageValidationConfig] = None) -> str:
    """
    Identify the image format with Pillow and check it against the configured limits.

    Args:
        image_bytes: Raw image file contents
        config: Validation limits (defaults to ImageValidationConfig())

    Returns:
        MIME type of the image (e.g., 'image/png')

    Raises:
        ImageValidationError: If the bytes are not a supported image within limits
    """
    if config is None:
        config = ImageValidationConfig()

    if not image_bytes:
        raise ImageValidationError("Image is empty")

    size_mb = len(image_bytes) / (1024 * 1024)
    if size_mb > config.max_file_size_mb:
        raise ImageValidationError(f"Image too large: {size_mb:.2f}MB (max: {config.max_file_size_mb}MB)")

    try:
        with PIL.Image.open(io.BytesIO(image_bytes)) as img:
            image_format = (img.format or "").upper()
            width, height = img.size
    except (PIL.UnidentifiedImageError, OSError) as exc:
        raise ImageValidationError(f"Failed to read image: {exc}") from exc

    if image_format not in config.supported_formats or image_format not in _FORMAT_MIME_TYPES:
        raise ImageValidationError(
            f"Unsupported image format: {image_format or 'unknown'}. Supported: {config.supported_formats}"
        )
    if width > config.max_width or height > config.max_height:
        raise ImageValidationError(f"Image too large: {width}x{height} (max: {config.max_width}x{config.max_height})")

    return _FORMAT_MIME_TYPES[image_format]


def image_bytes_to_data_url(image_bytes: bytes, config: Optional[ImageValidationConfig] = None) -> str:
    """Validate raw image bytes and return them as a data URL."""
    mime_type = detect_mime_type(image_bytes, config)
    return encode_image_bytes(image_bytes, mime_type)


def load_image_as_data_url(image_path: str, config: Optional[ImageValidationConfig] = None) -> str:
    """
    Read a chart image from disk and return it as a data URL.

    Raises:
        ImageValidationError: If the file is missing or not a supported image
    """
    if not os.path.exists(image_path):
        raise ImageValidationError(f"Chart image file not found: {image_path}")

    with open(image_path, "rb") as fh:
        image_bytes = fh.read()

    return image_bytes_to_data_url(image_bytes, config)
