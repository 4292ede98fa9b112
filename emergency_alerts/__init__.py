"""
Emergency Alerts
Forwards newly created emergency alerts to the security push topic
"""

from .models import AlertEvent, NotificationPayload, ForwardResult, ForwardStatus
from .forwarder import AlertForwarder, build_payload
from .triggers import DocumentPath, TriggerRegistry
from .constants import SECURITY_TOPIC, ALERT_DOCUMENT_PATH

__all__ = [
    "AlertEvent",
    "NotificationPayload",
    "ForwardResult",
    "ForwardStatus",
    "AlertForwarder",
    "build_payload",
    "DocumentPath",
    "TriggerRegistry",
    "SECURITY_TOPIC",
    "ALERT_DOCUMENT_PATH",
]
