"""SendGrid email notifier: one notification in, one email out."""

from __future__ import annotations

from .dispatcher import NotificationDispatcher
from .exceptions import (
    MediaResolutionError,
    NotificationDeliveryError,
    NotifierError,
    SendGridDeliveryError,
    UnknownSettingError,
)
from .media import HttpMediaResolver
from .memory import (
    ConsoleTransport,
    InMemoryMediaResolver,
    InMemorySettingsStore,
    InMemoryTransport,
)
from .message import (
    Attachment,
    DispatchResult,
    DispatchStatus,
    MediaObject,
    MediaReference,
    NotificationOptions,
    NotificationRequest,
    OutboundMessage,
    ResolvedMedia,
)
from .ports import IEmailTransport, IMediaResolver, ISettingsStore
from .sanitization import MetadataSanitizer
from .sendgrid import SendGridClient, SendGridConfig
from .settings import NotifierSettings, Setting
from .storage import JsonFileSettingsStore

__all__ = [
    "Attachment",
    "ConsoleTransport",
    "DispatchResult",
    "DispatchStatus",
    "HttpMediaResolver",
    "IEmailTransport",
    "IMediaResolver",
    "ISettingsStore",
    "InMemoryMediaResolver",
    "InMemorySettingsStore",
    "InMemoryTransport",
    "JsonFileSettingsStore",
    "MediaObject",
    "MediaReference",
    "MediaResolutionError",
    "MetadataSanitizer",
    "NotificationDeliveryError",
    "NotificationDispatcher",
    "NotificationOptions",
    "NotificationRequest",
    "NotifierError",
    "NotifierSettings",
    "OutboundMessage",
    "ResolvedMedia",
    "SendGridClient",
    "SendGridConfig",
    "SendGridDeliveryError",
    "Setting",
    "UnknownSettingError",
]
