"""Dict-backed settings store."""

from __future__ import annotations

from collections.abc import Mapping

from ..ports.settings_store import ISettingsStore


class InMemorySettingsStore(ISettingsStore):
    """Non-persistent store for tests and short-lived hosts."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
