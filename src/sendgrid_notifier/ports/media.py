"""Media resolution port."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IMediaResolver(Protocol):
    """Resolves media references and converts media objects to bytes."""

    async def resolve_reference(self, url: str) -> Any:
        """Resolve a URL into an opaque media object."""
        ...

    async def to_bytes(self, media: Any, mime_type: str) -> bytes:
        """Convert a media object into bytes of the requested encoding."""
        ...
