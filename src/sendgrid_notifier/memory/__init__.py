"""Memory adapters for testing and development."""

from __future__ import annotations

from .console import ConsoleTransport
from .fake import InMemoryTransport
from .media import InMemoryMediaResolver
from .store import InMemorySettingsStore

__all__ = [
    "ConsoleTransport",
    "InMemoryMediaResolver",
    "InMemorySettingsStore",
    "InMemoryTransport",
]
