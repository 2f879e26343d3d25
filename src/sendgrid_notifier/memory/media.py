"""In-memory media resolver for tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..exceptions import MediaResolutionError
from ..message import MediaObject
from ..ports.media import IMediaResolver


class InMemoryMediaResolver(IMediaResolver):
    """Serves pre-registered bytes per URL, without any conversion."""

    def __init__(self, media: Mapping[str, bytes] | None = None) -> None:
        self._media: dict[str, bytes] = dict(media or {})
        self.resolved_urls: list[str] = []

    def register(self, url: str, data: bytes) -> None:
        self._media[url] = data

    async def resolve_reference(self, url: str) -> MediaObject:
        self.resolved_urls.append(url)
        if url not in self._media:
            raise MediaResolutionError(url, "not registered")
        return MediaObject(data=self._media[url], mime_type="image/png", source=url)

    async def to_bytes(self, media: Any, mime_type: str) -> bytes:
        if isinstance(media, MediaObject):
            return media.data
        if isinstance(media, (bytes, bytearray)):
            return bytes(media)
        raise MediaResolutionError(None, f"Unsupported media object {type(media).__name__}")
