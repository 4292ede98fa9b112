# Re-exports the Firestore trigger so Firebase finds it in functions/main.py

from emergency_alerts.cloud_function import send_emergency_notification

__all__ = ["send_emergency_notification"]
