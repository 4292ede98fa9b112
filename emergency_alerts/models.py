"""
Alert forwarding models

- AlertEvent: the created Firestore document plus its path id
- NotificationPayload: what gets broadcast to the topic
- ForwardResult: outcome of one forwarder invocation
"""
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from emergency_alerts.constants import DEFAULT_MESSAGE, DEFAULT_UID


class AlertEvent(BaseModel):
    """New document in the emergency_alerts collection"""
    model_config = ConfigDict(extra='ignore')

    alertId: str
    message: Optional[str] = None
    uid: Optional[Any] = None

    @classmethod
    def from_document(cls, alert_id: str, document: Mapping[str, Any]) -> 'AlertEvent':
        """Build event from raw document fields"""
        return cls(
            alertId=alert_id,
            message=document.get('message'),
            uid=document.get('uid'),
        )

    def resolved_message(self) -> str:
        # Falsy values (empty string included) fall back
        return self.message or DEFAULT_MESSAGE

    def resolved_uid(self) -> str:
        return str(self.uid) if self.uid else DEFAULT_UID


class Notification(BaseModel):
    """Visible part of the push message"""
    title: str
    body: str


class NotificationPayload(BaseModel):
    """Push payload: visible notification + data section for the app"""
    notification: Notification
    data: Dict[str, str]


class ForwardStatus(str, Enum):
    SENT = 'sent'
    FAILED = 'failed'
    SKIPPED = 'skipped'


class ForwardResult(BaseModel):
    """Outcome of forwarding a single alert"""
    status: ForwardStatus
    alertId: Optional[str] = None
    messageId: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status != ForwardStatus.FAILED
