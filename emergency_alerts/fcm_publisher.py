"""
FCM publisher for topic broadcasts and topic membership
"""
import logging
from typing import List, Optional

import firebase_admin
from firebase_admin import messaging

from emergency_alerts.models import NotificationPayload

logger = logging.getLogger(__name__)


class FcmPublisher:
    """Sends notification payloads to FCM topics"""

    def __init__(self, app: Optional[firebase_admin.App] = None):
        # None -> firebase_admin default app
        self.app = app

    @staticmethod
    def build_message(topic: str, payload: NotificationPayload) -> messaging.Message:
        """Convert payload into an FCM topic message"""
        return messaging.Message(
            topic=topic,
            notification=messaging.Notification(
                title=payload.notification.title,
                body=payload.notification.body,
            ),
            data=dict(payload.data),
        )

    def send_to_topic(self, topic: str, payload: NotificationPayload, dry_run: bool = False) -> str:
        """
        Send one message to every subscriber of topic

        Returns the FCM message id. Errors propagate to the caller.
        """
        message = self.build_message(topic, payload)
        return messaging.send(message, dry_run=dry_run, app=self.app)

    def subscribe(self, tokens: List[str], topic: str) -> messaging.TopicManagementResponse:
        """Subscribe device registration tokens to topic"""
        response = messaging.subscribe_to_topic(tokens, topic, app=self.app)
        self._log_topic_response('subscribe', topic, response)
        return response

    def unsubscribe(self, tokens: List[str], topic: str) -> messaging.TopicManagementResponse:
        """Remove device registration tokens from topic"""
        response = messaging.unsubscribe_from_topic(tokens, topic, app=self.app)
        self._log_topic_response('unsubscribe', topic, response)
        return response

    @staticmethod
    def _log_topic_response(action: str, topic: str, response: messaging.TopicManagementResponse):
        logger.info(
            f"{action} '{topic}': {response.success_count} succeeded, "
            f"{response.failure_count} failed"
        )
        for err in response.errors:
            logger.warning(f"{action} '{topic}' failed for token #{err.index}: {err.reason}")
