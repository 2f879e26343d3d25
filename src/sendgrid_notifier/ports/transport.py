"""Email transport port."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..message import OutboundMessage


@runtime_checkable
class IEmailTransport(Protocol):
    """
    Client handle that delivers one assembled email.

    Adapters must explicitly declare: class SendGridClient(IEmailTransport):
    """

    async def send(self, message: OutboundMessage) -> None:
        """Deliver the message. Raises on any failure."""
        ...
