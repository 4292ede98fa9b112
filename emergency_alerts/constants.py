"""
Shared constants for alert forwarding
"""

# Firestore collection watched for new alerts
ALERTS_COLLECTION = 'emergency_alerts'
ALERT_DOCUMENT_PATH = f'{ALERTS_COLLECTION}/{{alertId}}'

# Staff phones/tablets subscribe to this topic
SECURITY_TOPIC = 'security'

# Notification content
NOTIFICATION_TITLE = 'Emergency Alert'

# Fallbacks for missing document fields
DEFAULT_MESSAGE = 'Emergency reported'
DEFAULT_UID = 'unknown'

# Entry point group scanned by the mobile bootstrap
PLUGIN_ENTRY_POINT_GROUP = 'emergency_alerts.plugins'
