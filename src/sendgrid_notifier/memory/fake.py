"""In-memory transport for test assertions."""

from __future__ import annotations

import logging

from ..message import OutboundMessage
from ..ports.transport import IEmailTransport

logger = logging.getLogger(__name__)


class InMemoryTransport(IEmailTransport):
    """
    Test double (Fake) that stores messages in a list for assertions.

    Pass ``fail_with`` to make every send raise that exception instead.
    """

    def __init__(self, api_key: str = "test-key", fail_with: BaseException | None = None) -> None:
        self.api_key = api_key
        self.fail_with = fail_with
        self.sent_messages: list[OutboundMessage] = []
        self.attempts = 0

    async def send(self, message: OutboundMessage) -> None:
        self.attempts += 1
        if self.fail_with is not None:
            raise self.fail_with
        self.sent_messages.append(message)

    def assert_sent(self, recipient: str, count: int = 1) -> None:
        """Helper for test assertions."""
        matches = [m for m in self.sent_messages if m.to == recipient]
        if len(matches) != count:
            raise AssertionError(
                f"Expected {count} emails to {recipient}, but found {len(matches)}."
            )

    def clear(self) -> None:
        """Clear all sent messages."""
        self.sent_messages.clear()
        self.attempts = 0
