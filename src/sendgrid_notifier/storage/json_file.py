"""Settings store persisted as a flat JSON object on disk."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from ..ports.settings_store import ISettingsStore
from ..settings import coerce_setting_value

logger = logging.getLogger(__name__)


class JsonFileSettingsStore(ISettingsStore):
    """
    Keeps settings in memory and rewrites the whole file on every write.

    The file is replaced atomically so a crash never leaves it half-written.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._items: dict[str, str] = self._load()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        raw = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        if not isinstance(raw, dict):
            raise ValueError(f"Settings file {self.path} must contain a JSON object")
        return {str(k): coerce_setting_value(v) for k, v in raw.items() if v is not None}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        updated = {**self._items, key: value}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(updated, fh, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        self._items = updated
        logger.debug("Persisted setting %s to %s", key, self.path)
