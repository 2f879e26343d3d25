"""Exception hierarchy for the SendGrid notifier."""

from __future__ import annotations


class NotifierError(Exception):
    """Root exception for the sendgrid-notifier package."""


class UnknownSettingError(NotifierError, KeyError):
    """Raised when a setting outside the known keys is written."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown setting {key!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class MediaResolutionError(NotifierError):
    """Raised when a media reference cannot be fetched or converted."""

    def __init__(self, source: str | None, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to resolve media {source or '<object>'}: {reason}")


class NotificationDeliveryError(NotifierError):
    """Raised when the transport fails to deliver a message."""

    def __init__(self, recipient: str, reason: str) -> None:
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Failed to deliver email to {recipient}: {reason}")


class SendGridDeliveryError(NotificationDeliveryError):
    """Raised when the SendGrid API rejects a message (non-2xx response)."""

    def __init__(self, status_code: int, body: str, recipient: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(recipient, f"SendGrid API error ({status_code}): {body}")
