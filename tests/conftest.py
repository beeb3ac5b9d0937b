"""
Shared fixtures: a provider and dispatcher wired to recording fakes.
"""
import pytest

from loyalty.services.connection import ConnectionProvider
from loyalty.services.notifications import NotificationDispatcher

from fakes import FACTORY_NAME, QUEUE_NAME, FakeDirectory, FakeQueue, FakeTransport


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def directory(transport):
    return FakeDirectory({
        QUEUE_NAME: FakeQueue("loyalty.notifications"),
        FACTORY_NAME: transport,
    })


@pytest.fixture
def provider(directory):
    return ConnectionProvider(directory, queue_name=QUEUE_NAME, factory_name=FACTORY_NAME)


@pytest.fixture
def dispatcher(provider):
    return NotificationDispatcher(provider)
