"""Console transport for development debugging."""

from __future__ import annotations

import logging

from ..message import OutboundMessage
from ..ports.transport import IEmailTransport

logger = logging.getLogger(__name__)


class ConsoleTransport(IEmailTransport):
    """
    Development adapter that prints emails instead of sending them.
    """

    def __init__(self, api_key: str = "", output_to_stdout: bool = True):
        self.api_key = api_key
        self.output_to_stdout = output_to_stdout

    async def send(self, message: OutboundMessage) -> None:
        output = [
            "═" * 50,
            "EMAIL",
            f"To:      {message.to}",
            f"From:    {message.from_}",
            f"Subject: {message.subject or '(No Subject)'}",
            f"HTML:    {message.html_body}",
        ]

        if message.attachments:
            files = ", ".join(a.filename for a in message.attachments)
            output.append(f"Files:   {files}")

        output.append("═" * 50)

        full_output = "\n".join(output)
        logger.info(full_output)

        if self.output_to_stdout:
            print(full_output)
