"""
Cloud Functions entry point
Triggered when a new document is created in the 'emergency_alerts' collection
"""
import logging

from firebase_functions import firestore_fn

from emergency_alerts.constants import ALERT_DOCUMENT_PATH
from emergency_alerts.handlers import forward_alert

logger = logging.getLogger(__name__)


def handle_alert_created(event) -> None:
    """Forward the created snapshot; always completes normally"""
    snapshot = event.data
    document = snapshot.to_dict() if snapshot is not None else None
    if document is None:
        logger.debug(f"Alert {event.params.get('alertId')} has no data, nothing to send")
        return None

    try:
        forward_alert(dict(event.params), document)
    except Exception as e:
        # Forwarder construction (config, credentials) happens lazily here
        logger.error(f"Error sending notification: {e}", exc_info=True)

    return None


send_emergency_notification = firestore_fn.on_document_created(
    document=ALERT_DOCUMENT_PATH
)(handle_alert_created)
