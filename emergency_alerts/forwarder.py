"""
Alert Forwarder - turns a created alert document into one topic broadcast
"""
import logging
from typing import Any, Mapping, Optional, Protocol

from emergency_alerts.constants import NOTIFICATION_TITLE, SECURITY_TOPIC
from emergency_alerts.models import (
    AlertEvent,
    ForwardResult,
    ForwardStatus,
    Notification,
    NotificationPayload,
)

logger = logging.getLogger(__name__)


class TopicPublisher(Protocol):
    def send_to_topic(self, topic: str, payload: NotificationPayload, dry_run: bool = False) -> str:
        ...


def build_payload(event: AlertEvent) -> NotificationPayload:
    """Notification with fixed title, resolved body and uid/alertId data"""
    return NotificationPayload(
        notification=Notification(
            title=NOTIFICATION_TITLE,
            body=event.resolved_message(),
        ),
        data={
            'uid': event.resolved_uid(),
            'alertId': event.alertId,
        },
    )


class AlertForwarder:
    """
    Forwards alerts to a single broadcast topic

    Best-effort: one dispatch attempt per alert, failures are logged and
    reported in the result but never raised to the trigger.
    """

    def __init__(self, publisher: TopicPublisher, topic: str = SECURITY_TOPIC, dry_run: bool = False):
        self.publisher = publisher
        self.topic = topic
        self.dry_run = dry_run

    def forward(self, alert_id: str, document: Optional[Mapping[str, Any]]) -> ForwardResult:
        """Dispatch one notification for a created alert document"""
        if document is None:
            logger.debug(f"Alert {alert_id} has no data, nothing to send")
            return ForwardResult(status=ForwardStatus.SKIPPED, alertId=alert_id)

        try:
            event = AlertEvent.from_document(alert_id, document)
            payload = build_payload(event)
            response = self.publisher.send_to_topic(self.topic, payload, dry_run=self.dry_run)
        except Exception as err:
            logger.error(f"Error sending notification: {err}")
            return ForwardResult(status=ForwardStatus.FAILED, alertId=alert_id, error=str(err))

        logger.info(f"Notification sent: {response}")
        return ForwardResult(status=ForwardStatus.SENT, alertId=alert_id, messageId=str(response))
