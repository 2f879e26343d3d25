"""Settings store port."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ISettingsStore(Protocol):
    """
    Persistent string key-value store backing the notifier settings.

    Implementations: InMemorySettingsStore, JsonFileSettingsStore.
    """

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None when the key was never written."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Persist a value. Failures propagate to the caller."""
        ...
