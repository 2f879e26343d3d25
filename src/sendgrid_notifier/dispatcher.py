"""Notification dispatcher: settings lifecycle and the send pipeline."""

from __future__ import annotations

import base64
import logging
from typing import TYPE_CHECKING, Any

from .exceptions import UnknownSettingError
from .message import (
    SNAPSHOT_FILENAME,
    SNAPSHOT_MIME_TYPE,
    Attachment,
    DispatchResult,
    DispatchStatus,
    MediaReference,
    MediaSource,
    NotificationOptions,
    NotificationRequest,
    OutboundMessage,
    as_media_source,
)
from .sanitization import MetadataSanitizer, default_sanitizer
from .sendgrid.client import SendGridClient
from .settings import (
    SETTING_KEYS,
    TO_KEY,
    NotifierSettings,
    Setting,
    coerce_setting_value,
    describe_settings,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from .ports.media import IMediaResolver
    from .ports.settings_store import ISettingsStore
    from .ports.transport import IEmailTransport

    ClientFactory = Callable[[str], IEmailTransport]

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """
    Turns host notification requests into SendGrid emails.

    Owns the client handle, which exists only while the ``to``, ``from``
    and ``apikey`` settings are all non-empty. Every settings write
    discards the handle and rebuilds it from the store.
    """

    def __init__(
        self,
        store: ISettingsStore,
        resolver: IMediaResolver,
        client_factory: ClientFactory | None = None,
        sanitizer: MetadataSanitizer | None = None,
    ) -> None:
        self.store = store
        self.resolver = resolver
        self.client_factory: ClientFactory = client_factory or SendGridClient
        self.sanitizer = sanitizer or default_sanitizer
        self._client: IEmailTransport | None = None
        self._initialize_client()

    @property
    def client(self) -> IEmailTransport | None:
        return self._client

    @property
    def is_ready(self) -> bool:
        return self._client is not None

    @property
    def settings(self) -> NotifierSettings:
        return NotifierSettings.load(self.store)

    def _initialize_client(self) -> None:
        settings = self.settings
        if not settings.is_complete:
            self._client = None
            return

        assert settings.api_key is not None  # ensured by is_complete
        self._client = self.client_factory(settings.api_key)
        logger.info("Initialized new SendGrid client")

    # ── Settings surface ─────────────────────────────────────────────

    async def get_settings(self) -> list[Setting]:
        return describe_settings(self.store)

    async def put_setting(self, key: str, value: Any) -> None:
        """Write one setting, then rebuild or drop the client handle."""
        if key not in SETTING_KEYS:
            raise UnknownSettingError(key)

        text = coerce_setting_value(value)
        self.store.set_item(key, text)
        logger.debug("Setting updated: %s", self.sanitizer.sanitize({key: text}))
        self._initialize_client()

    # ── Dispatch ─────────────────────────────────────────────────────

    async def send_notification(
        self,
        title: str,
        options: NotificationOptions | Mapping[str, Any] | None = None,
        media: Any = None,
        icon: Any = None,
    ) -> DispatchResult:
        """
        Send one notification email.

        Returns a SKIPPED result when the settings are incomplete. Media
        and transport failures are re-raised exactly as the collaborator
        raised them.
        """
        request = NotificationRequest(
            title=title,
            body=NotificationOptions.coerce(options).body or "",
            media=as_media_source(media),
            icon=as_media_source(icon),
        )
        result = await self.dispatch(request)
        if result.status is DispatchStatus.FAILED and result.error is not None:
            raise result.error
        return result

    async def dispatch(self, request: NotificationRequest) -> DispatchResult:
        """Run resolve, encode, assemble and deliver without raising."""
        client = self._client
        if client is None:
            logger.warning("SendGrid client not initialized, cannot send notification")
            return DispatchResult.skipped("SendGrid client not initialized")

        logger.info("Starting to send email")

        try:
            attachments = await self._build_attachments(request.media)
            message = self._assemble(request, attachments)
            await client.send(message)
        except Exception as e:
            logger.error(f"Failed to send email notification '{request.title}': {e}")
            return DispatchResult.failed(e, recipient=self.store.get_item(TO_KEY))

        logger.info(f"Email sent to {message.to}")
        return DispatchResult.sent(message.to)

    async def _build_attachments(self, media: MediaSource | None) -> list[Attachment]:
        if media is None:
            return []

        if isinstance(media, MediaReference):
            resolved = await self.resolver.resolve_reference(media.url)
        else:
            resolved = media.media

        data = await self.resolver.to_bytes(resolved, SNAPSHOT_MIME_TYPE)
        return [
            Attachment(
                content=base64.b64encode(data).decode("ascii"),
                filename=SNAPSHOT_FILENAME,
                mime_type=SNAPSHOT_MIME_TYPE,
            )
        ]

    def _assemble(
        self, request: NotificationRequest, attachments: list[Attachment]
    ) -> OutboundMessage:
        # Addresses are re-read at send time, not taken from initialization.
        settings = self.settings
        return OutboundMessage(
            to=settings.to or "",
            from_=settings.from_ or "",
            subject=request.title,
            html_body=request.body,
            attachments=tuple(attachments),
        )
