"""FastAPI integration for sendgrid-notifier."""

from .router import (
    DispatchResponse,
    NotificationPayload,
    SettingUpdate,
    create_notifier_router,
)

__all__: list[str] = [
    "DispatchResponse",
    "NotificationPayload",
    "SettingUpdate",
    "create_notifier_router",
]
