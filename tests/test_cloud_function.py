# tests/test_cloud_function.py

import logging
from types import SimpleNamespace

import pytest

from emergency_alerts import handlers
from emergency_alerts.cloud_function import handle_alert_created, send_emergency_notification
from emergency_alerts.firebase_client import FirebaseClient
from emergency_alerts.forwarder import AlertForwarder
from emergency_alerts.models import ForwardStatus


def created_event(alert_id, document, path=None):
    snapshot = SimpleNamespace(to_dict=lambda: document)
    return SimpleNamespace(
        data=snapshot,
        document=path or f'emergency_alerts/{alert_id}',
        params={'alertId': alert_id},
    )


def error_records(caplog):
    return [r for r in caplog.records
            if r.name == 'emergency_alerts.cloud_function' and r.levelno == logging.ERROR]


@pytest.fixture
def lazy_forwarder(monkeypatch):
    """No injected forwarder: the trigger builds one from the environment."""
    handlers.set_forwarder(None)
    monkeypatch.setattr(FirebaseClient, '_instance', None)
    for name in ('GOOGLE_APPLICATION_CREDENTIALS', 'FIREBASE_PROJECT_ID', 'ALERT_TOPIC', 'ALERT_DRY_RUN'):
        monkeypatch.delenv(name, raising=False)
    yield
    handlers.set_forwarder(None)


class TestCloudFunction:

    def test_created_alert_is_forwarded(self, installed_forwarder, publisher):
        event = created_event('a456', {'message': 'Fire on 3rd floor', 'uid': 'u123'})

        assert handle_alert_created(event) is None

        topic, payload, _ = publisher.sent[0]
        assert topic == 'security'
        assert payload.model_dump() == {
            'notification': {'title': 'Emergency Alert', 'body': 'Fire on 3rd floor'},
            'data': {'uid': 'u123', 'alertId': 'a456'},
        }

    def test_alert_id_comes_from_params(self, installed_forwarder, publisher):
        """✅ Unusual document paths still forward using the path parameter."""
        event = created_event('a7', {'message': 'x'}, path='projects/p/databases/(default)/documents/emergency_alerts/a7')

        handle_alert_created(event)

        _, payload, _ = publisher.sent[0]
        assert payload.data['alertId'] == 'a7'

    def test_missing_snapshot_sends_nothing(self, installed_forwarder, publisher):
        event = SimpleNamespace(data=None, document='emergency_alerts/a1', params={'alertId': 'a1'})

        assert handle_alert_created(event) is None
        assert publisher.sent == []

    def test_missing_snapshot_does_not_build_forwarder(self, lazy_forwarder, monkeypatch):
        def fail_create(settings=None):
            raise AssertionError("forwarder should not be built")

        monkeypatch.setattr(handlers, 'create_forwarder', fail_create)

        assert handle_alert_created(SimpleNamespace(data=None, params={'alertId': 'a1'})) is None
        assert handle_alert_created(created_event('a1', None)) is None

    def test_failure_does_not_raise(self, failing_publisher):
        handlers.set_forwarder(AlertForwarder(failing_publisher))
        try:
            assert handle_alert_created(created_event('a1', {'message': 'x'})) is None
        finally:
            handlers.set_forwarder(None)

        assert len(failing_publisher.sent) == 1

    def test_bad_credentials_path_does_not_raise(self, lazy_forwarder, monkeypatch, caplog):
        monkeypatch.setenv('GOOGLE_APPLICATION_CREDENTIALS', '/nonexistent/sa.json')

        assert handle_alert_created(created_event('a1', {'message': 'x'})) is None
        assert len(error_records(caplog)) == 1

    def test_blank_topic_does_not_raise(self, lazy_forwarder, monkeypatch, caplog):
        monkeypatch.setenv('ALERT_TOPIC', ' ')

        assert handle_alert_created(created_event('a1', {'message': 'x'})) is None
        records = error_records(caplog)
        assert len(records) == 1
        assert 'ALERT_TOPIC' in records[0].getMessage()

    def test_function_is_registered_for_alert_documents(self):
        endpoint = getattr(send_emergency_notification, '__firebase_endpoint__')

        assert 'emergency_alerts/{alertId}' in repr(endpoint)


class TestHandlers:

    def test_forward_alert_returns_result(self, installed_forwarder):
        result = handlers.forward_alert({'alertId': 'a9'}, {'message': 'Gas leak'})

        assert result.status == ForwardStatus.SENT
        assert result.alertId == 'a9'
