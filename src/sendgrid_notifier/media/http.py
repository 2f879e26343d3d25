"""HTTP media resolver: downloads with httpx, converts with Pillow."""

from __future__ import annotations

import asyncio
import io
import logging
from typing import Any

import httpx
from PIL import Image, UnidentifiedImageError

from ..exceptions import MediaResolutionError
from ..message import MediaObject
from ..ports.media import IMediaResolver

logger = logging.getLogger(__name__)

_PIL_FORMATS: dict[str, str] = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/gif": "GIF",
    "image/webp": "WEBP",
    "image/bmp": "BMP",
}

# Formats without an alpha channel
_OPAQUE_FORMATS = frozenset({"JPEG", "BMP"})

# Modes PNG can store directly; anything else (CMYK, YCbCr, LAB...) is converted
_PNG_MODES = frozenset({"1", "L", "LA", "P", "RGB", "RGBA", "I", "I;16"})


def _target_mode(img: Image.Image, target: str) -> str | None:
    if target in _OPAQUE_FORMATS and img.mode not in ("RGB", "L"):
        return "RGB"
    if target == "PNG" and img.mode not in _PNG_MODES:
        return "RGBA" if "A" in img.getbands() else "RGB"
    return None


def convert_image(data: bytes, mime_type: str) -> bytes:
    """Re-encode image bytes into ``mime_type`` using Pillow."""
    target = _PIL_FORMATS.get(mime_type)
    if target is None:
        raise MediaResolutionError(None, f"Unsupported target encoding {mime_type}")

    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise MediaResolutionError(None, f"Cannot decode image: {e}") from e

    with img:
        mode = _target_mode(img, target)
        converted = img.convert(mode) if mode else img
        buffer = io.BytesIO()
        try:
            converted.save(buffer, format=target)
        except (OSError, ValueError) as e:
            raise MediaResolutionError(None, f"Cannot encode image as {mime_type}: {e}") from e

    return buffer.getvalue()


class HttpMediaResolver(IMediaResolver):
    """
    Resolves media URLs by downloading them.

    Conversion skips Pillow when the payload is already in the
    requested encoding.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self._http_transport = http_transport

    async def resolve_reference(self, url: str) -> MediaObject:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._http_transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise MediaResolutionError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise MediaResolutionError(url, str(e)) from e

        content_type = response.headers.get("Content-Type", "application/octet-stream")
        mime_type = content_type.split(";")[0].strip().lower()
        logger.debug("Fetched %d bytes of %s from %s", len(response.content), mime_type, url)
        return MediaObject(data=response.content, mime_type=mime_type, source=url)

    async def to_bytes(self, media: Any, mime_type: str) -> bytes:
        if isinstance(media, (bytes, bytearray)):
            media = MediaObject(data=bytes(media), mime_type="application/octet-stream")
        if not isinstance(media, MediaObject):
            raise MediaResolutionError(None, f"Unsupported media object {type(media).__name__}")

        if media.mime_type == mime_type:
            return media.data

        try:
            return await asyncio.to_thread(convert_image, media.data, mime_type)
        except MediaResolutionError as e:
            raise MediaResolutionError(media.source, e.reason) from e
