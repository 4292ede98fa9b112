# tests/conftest.py

import pytest

from emergency_alerts.forwarder import AlertForwarder
from emergency_alerts.handlers import set_forwarder


class FakePublisher:
    """Records topic sends instead of calling FCM"""

    def __init__(self, response='projects/demo/messages/1', error=None):
        self.response = response
        self.error = error
        self.sent = []

    def send_to_topic(self, topic, payload, dry_run=False):
        self.sent.append((topic, payload, dry_run))
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def publisher():
    return FakePublisher()


@pytest.fixture
def failing_publisher():
    return FakePublisher(error=ConnectionError("network unreachable"))


@pytest.fixture
def forwarder(publisher):
    return AlertForwarder(publisher)


@pytest.fixture
def installed_forwarder(forwarder):
    """Forwarder injected into the registered trigger handlers."""
    set_forwarder(forwarder)
    yield forwarder
    set_forwarder(None)
