"""Test configuration for sendgrid-notifier."""

from __future__ import annotations

import pytest

from sendgrid_notifier.dispatcher import NotificationDispatcher
from sendgrid_notifier.memory import (
    InMemoryMediaResolver,
    InMemorySettingsStore,
    InMemoryTransport,
)

pytest_plugins = ["pytest_asyncio"]

PNG_MAGIC = bytes([0x89, 0x50, 0x4E, 0x47])


class TransportFactory:
    """Client factory that remembers every handle it built."""

    def __init__(self, fail_with: BaseException | None = None) -> None:
        self.fail_with = fail_with
        self.built: list[InMemoryTransport] = []

    def __call__(self, api_key: str) -> InMemoryTransport:
        transport = InMemoryTransport(api_key=api_key, fail_with=self.fail_with)
        self.built.append(transport)
        return transport


@pytest.fixture
def complete_settings() -> dict[str, str]:
    return {"to": "a@x.com", "from": "b@x.com", "apikey": "k"}


@pytest.fixture
def store(complete_settings: dict[str, str]) -> InMemorySettingsStore:
    return InMemorySettingsStore(complete_settings)


@pytest.fixture
def resolver() -> InMemoryMediaResolver:
    return InMemoryMediaResolver({"http://img/x.png": PNG_MAGIC})


@pytest.fixture
def factory() -> TransportFactory:
    return TransportFactory()


@pytest.fixture
def dispatcher(
    store: InMemorySettingsStore,
    resolver: InMemoryMediaResolver,
    factory: TransportFactory,
) -> NotificationDispatcher:
    return NotificationDispatcher(store=store, resolver=resolver, client_factory=factory)


@pytest.fixture
def make_factory() -> type[TransportFactory]:
    return TransportFactory
