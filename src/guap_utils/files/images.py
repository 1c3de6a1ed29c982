"""
Module: files.images

Purpose:
    Re-encodes base64 images as smaller JPEGs. Images larger than the
    configured maximum are scaled down so their longer side fits.

Key Functions:
    - compress_img(): base64 / data URL image -> JPEG data URL
    - scaled_size(): Target dimensions for a given max side

Dependencies:
    - PIL: Image decoding, resizing and JPEG encoding
    - files.encoding: data URL decoding and size estimate

Used By:
    - guap_utils.files: Public re-export
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
from typing import Any, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from guap_utils.config import CompressionConfig
from .encoding import Blob, FileEncodingError, calc_base64_size, to_blob

logger = logging.getLogger(__name__)


class ImageCompressionError(ValueError):
    """Raised when an image cannot be decoded or re-encoded."""


def scaled_size(width: int, height: int, max_width: int) -> Tuple[int, int]:
    """
    Dimensions after fitting the longer side into ``max_width``.

    Images already within bounds keep their size. Fractional results are
    truncated, with a minimum of 1 pixel.

    Example:
        >>> scaled_size(4000, 3000, 1000)
        (1000, 750)
        >>> scaled_size(300, 600, 1000)
        (300, 600)
    """
    if max(width, height) <= max_width:
        return width, height
    if width > height:
        return max_width, max(1, int(max_width * height / width))
    return max(1, int(max_width * width / height)), max_width


def _decode_image_bytes(base64_image: str) -> bytes:
    if "," in base64_image:
        try:
            return to_blob(base64_image).data
        except FileEncodingError as exc:
            raise ImageCompressionError(f"Failed to load image: {exc}") from exc
    try:
        return base64.b64decode(base64_image)
    except (binascii.Error, ValueError) as exc:
        raise ImageCompressionError("Failed to load image: invalid base64") from exc


def compress_img(
    base64_image: Any,
    max_width: Optional[int] = None,
    quality: Optional[float] = None,
    *,
    config: Optional[CompressionConfig] = None,
) -> str:
    """
    Scale and re-encode an image as JPEG.

    Args:
        base64_image: Data URL or bare base64 image payload
        max_width: Longest side allowed, in pixels (default from config: 1000)
        quality: JPEG quality 0-1. When omitted, 0.9 is used for payloads
            up to 1 MB and 0.8 above.
        config: Compression settings (default CompressionConfig())

    Returns:
        ``data:image/jpeg;base64,...`` string.

    Raises:
        ImageCompressionError: If input is empty or not a decodable image.

    Example:
        >>> small = compress_img(photo_data_url, max_width=800)
        >>> small.startswith("data:image/jpeg;base64,")
        True
    """
    if not base64_image or not isinstance(base64_image, str):
        raise ImageCompressionError("Base64 image string must not be empty")

    cfg = config or CompressionConfig()
    limit = max_width if max_width is not None else cfg.max_width
    if quality is None:
        quality = cfg.quality_for(calc_base64_size(base64_image))

    data = _decode_image_bytes(base64_image)
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            target = scaled_size(img.width, img.height, limit)
            logger.debug(
                "compress_img: %dx%d -> %dx%d, quality %.2f",
                img.width, img.height, target[0], target[1], quality,
            )
            result = img.convert("RGB") if img.mode != "RGB" else img.copy()
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageCompressionError("Failed to load image") from exc

    if target != result.size:
        result = result.resize(target, Image.Resampling.LANCZOS)

    buffer = io.BytesIO()
    jpeg_quality = min(100, max(1, round(quality * 100)))
    result.save(buffer, format=cfg.output_format, quality=jpeg_quality)
    return Blob(buffer.getvalue(), cfg.output_mime).to_data_url()
