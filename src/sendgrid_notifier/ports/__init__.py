"""Port definitions for the notifier's collaborators."""

from __future__ import annotations

from sendgrid_notifier.ports.media import IMediaResolver
from sendgrid_notifier.ports.settings_store import ISettingsStore
from sendgrid_notifier.ports.transport import IEmailTransport

__all__ = [
    "IEmailTransport",
    "IMediaResolver",
    "ISettingsStore",
]
