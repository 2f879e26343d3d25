"""Tests for the in-memory and console adapters."""

from __future__ import annotations

import pytest

from sendgrid_notifier.exceptions import MediaResolutionError
from sendgrid_notifier.memory import (
    ConsoleTransport,
    InMemoryMediaResolver,
    InMemoryTransport,
)
from sendgrid_notifier.message import Attachment, OutboundMessage
from sendgrid_notifier.ports.media import IMediaResolver
from sendgrid_notifier.ports.transport import IEmailTransport


def _message(to: str = "a@x.com", attachments: tuple = ()) -> OutboundMessage:
    return OutboundMessage(
        to=to, from_="b@x.com", subject="Alert", html_body="<p>hi</p>", attachments=attachments
    )


class TestInMemoryTransport:
    @pytest.mark.asyncio
    async def test_records_messages(self) -> None:
        transport = InMemoryTransport()
        await transport.send(_message())
        await transport.send(_message(to="c@x.com"))

        transport.assert_sent("a@x.com")
        transport.assert_sent("c@x.com", count=1)
        assert transport.attempts == 2

    @pytest.mark.asyncio
    async def test_assert_sent_mismatch(self) -> None:
        transport = InMemoryTransport()
        await transport.send(_message())

        with pytest.raises(AssertionError, match="Expected 2 emails"):
            transport.assert_sent("a@x.com", count=2)

    @pytest.mark.asyncio
    async def test_clear(self) -> None:
        transport = InMemoryTransport()
        await transport.send(_message())
        transport.clear()

        assert transport.sent_messages == []
        assert transport.attempts == 0

    @pytest.mark.asyncio
    async def test_fail_with(self) -> None:
        transport = InMemoryTransport(fail_with=RuntimeError("boom"))

        with pytest.raises(RuntimeError, match="boom"):
            await transport.send(_message())

        assert transport.sent_messages == []
        assert transport.attempts == 1

    def test_satisfies_port(self) -> None:
        assert isinstance(InMemoryTransport(), IEmailTransport)


class TestConsoleTransport:
    @pytest.mark.asyncio
    async def test_prints_summary(self, capsys) -> None:
        message = _message(attachments=(Attachment(content="iVBORw=="),))

        await ConsoleTransport().send(message)

        out = capsys.readouterr().out
        assert "To:      a@x.com" in out
        assert "Subject: Alert" in out
        assert "Files:   snapshot.png" in out

    @pytest.mark.asyncio
    async def test_quiet_mode(self, capsys) -> None:
        await ConsoleTransport(output_to_stdout=False).send(_message())
        assert capsys.readouterr().out == ""


class TestInMemoryMediaResolver:
    @pytest.mark.asyncio
    async def test_registered_url(self) -> None:
        resolver = InMemoryMediaResolver()
        resolver.register("http://img/a", b"png")

        media = await resolver.resolve_reference("http://img/a")

        assert await resolver.to_bytes(media, "image/png") == b"png"
        assert resolver.resolved_urls == ["http://img/a"]

    @pytest.mark.asyncio
    async def test_unknown_url(self) -> None:
        with pytest.raises(MediaResolutionError, match="not registered"):
            await InMemoryMediaResolver().resolve_reference("http://img/none")

    def test_satisfies_port(self) -> None:
        assert isinstance(InMemoryMediaResolver(), IMediaResolver)
