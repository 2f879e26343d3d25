"""Settings surface: keys, descriptors and the configuration snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from .ports.settings_store import ISettingsStore

TO_KEY = "to"
FROM_KEY = "from"
API_KEY_KEY = "apikey"

SETTING_KEYS: tuple[str, ...] = (TO_KEY, FROM_KEY, API_KEY_KEY)


class Setting(BaseModel):
    """A single setting as exposed to a host configuration UI."""

    model_config = ConfigDict(frozen=True)

    title: str
    key: str
    description: str | None = None
    value: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class _SettingSpec:
    title: str
    description: str | None = None
    type: str | None = None


_SETTING_SPECS: dict[str, _SettingSpec] = {
    TO_KEY: _SettingSpec(
        title="To",
        description="Recipient of emails created by this plugin.",
    ),
    FROM_KEY: _SettingSpec(
        title="From",
        description=(
            "Sender address for emails created by this plugin. "
            "Must be a verified sender in your Twilio SendGrid account."
        ),
    ),
    API_KEY_KEY: _SettingSpec(title="SendGrid API Key", type="password"),
}


@dataclass(frozen=True)
class NotifierSettings:
    """Snapshot of the three persisted settings."""

    to: str | None = None
    from_: str | None = None
    api_key: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.to and self.from_ and self.api_key)

    @classmethod
    def load(cls, store: ISettingsStore) -> NotifierSettings:
        return cls(
            to=store.get_item(TO_KEY),
            from_=store.get_item(FROM_KEY),
            api_key=store.get_item(API_KEY_KEY),
        )


def describe_settings(store: ISettingsStore) -> list[Setting]:
    """Build the settings list from the store's current values."""
    return [
        Setting(
            title=spec.title,
            key=key,
            description=spec.description,
            value=store.get_item(key),
            type=spec.type,
        )
        for key, spec in _SETTING_SPECS.items()
    ]


def coerce_setting_value(value: Any) -> str:
    """Coerce any host value to the string form kept in the store."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
