"""Message, media and dispatch-result types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Union


SNAPSHOT_FILENAME = "snapshot.png"
SNAPSHOT_MIME_TYPE = "image/png"


class DispatchStatus(Enum):
    """Outcome of a single dispatch call."""

    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class DispatchResult:
    """Immutable record of one notification dispatch."""

    status: DispatchStatus
    recipient: str | None = None
    reason: str | None = None
    error: BaseException | None = field(default=None, compare=False, repr=False)
    dispatched_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.dispatched_at is None:
            object.__setattr__(self, "dispatched_at", datetime.now(timezone.utc))

    @classmethod
    def sent(cls, recipient: str) -> DispatchResult:
        """Create a result for a delivered email."""
        return cls(status=DispatchStatus.SENT, recipient=recipient)

    @classmethod
    def skipped(cls, reason: str) -> DispatchResult:
        """Create a result for a request dropped without any attempt."""
        return cls(status=DispatchStatus.SKIPPED, reason=reason)

    @classmethod
    def failed(cls, error: BaseException, recipient: str | None = None) -> DispatchResult:
        """Create a result for an attempt that raised."""
        return cls(
            status=DispatchStatus.FAILED,
            recipient=recipient,
            reason=str(error),
            error=error,
        )


@dataclass(frozen=True)
class MediaObject:
    """Decoded media payload as produced by the bundled resolvers."""

    data: bytes
    mime_type: str
    source: str | None = None


@dataclass(frozen=True)
class MediaReference:
    """Media given as a URL that still has to be resolved."""

    url: str


@dataclass(frozen=True)
class ResolvedMedia:
    """Media already resolved into an opaque media object."""

    media: Any


MediaSource = Union[MediaReference, ResolvedMedia]


def as_media_source(value: Any) -> MediaSource | None:
    """Normalise the host's ``str | media object | None`` argument."""
    if value is None:
        return None
    if isinstance(value, (MediaReference, ResolvedMedia)):
        return value
    if isinstance(value, str):
        return MediaReference(value)
    return ResolvedMedia(value)


@dataclass(frozen=True)
class NotificationOptions:
    """Optional notification fields supplied by the host."""

    body: str | None = None

    @classmethod
    def coerce(cls, options: NotificationOptions | Mapping[str, Any] | None) -> NotificationOptions:
        if options is None:
            return cls()
        if isinstance(options, NotificationOptions):
            return options
        return cls(body=options.get("body"))


@dataclass(frozen=True)
class NotificationRequest:
    """One transient send request."""

    title: str
    body: str = ""
    media: MediaSource | None = None
    # Accepted for host compatibility; never attached.
    icon: MediaSource | None = None


@dataclass(frozen=True)
class Attachment:
    """Immutable email attachment with base64 content."""

    content: str
    filename: str = SNAPSHOT_FILENAME
    mime_type: str = SNAPSHOT_MIME_TYPE
    disposition: str = "attachment"


@dataclass(frozen=True)
class OutboundMessage:
    """Immutable email handed to the transport."""

    to: str
    from_: str
    subject: str
    html_body: str
    attachments: tuple[Attachment, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.attachments, tuple):
            object.__setattr__(self, "attachments", tuple(self.attachments))
