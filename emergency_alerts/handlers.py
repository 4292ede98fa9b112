"""
Trigger handlers wired to the alert forwarder
"""
import logging
from typing import Any, Dict, Mapping, Optional

from emergency_alerts.config import Settings
from emergency_alerts.constants import ALERT_DOCUMENT_PATH
from emergency_alerts.fcm_publisher import FcmPublisher
from emergency_alerts.firebase_client import FirebaseClient
from emergency_alerts.forwarder import AlertForwarder
from emergency_alerts.models import ForwardResult
from emergency_alerts.triggers import TriggerRegistry

logger = logging.getLogger(__name__)

triggers = TriggerRegistry()

_forwarder: Optional[AlertForwarder] = None


def create_forwarder(settings: Optional[Settings] = None) -> AlertForwarder:
    """Build a forwarder bound to the process-wide Firebase app"""
    settings = settings or Settings.from_env()
    app = FirebaseClient.get_app(settings)
    return AlertForwarder(FcmPublisher(app), topic=settings.topic, dry_run=settings.dry_run)


def get_forwarder() -> AlertForwarder:
    global _forwarder
    if _forwarder is None:
        _forwarder = create_forwarder()
    return _forwarder


def set_forwarder(forwarder: Optional[AlertForwarder]):
    """Inject a forwarder (None resets to lazy creation)"""
    global _forwarder
    _forwarder = forwarder


@triggers.on_create(ALERT_DOCUMENT_PATH)
def forward_alert(params: Dict[str, str], document: Optional[Mapping[str, Any]]) -> ForwardResult:
    """New emergency_alerts/{alertId} document -> security topic broadcast"""
    return get_forwarder().forward(params['alertId'], document)
