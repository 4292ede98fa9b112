"""
Runtime settings read from environment variables
"""
import os
from typing import Optional

from pydantic import BaseModel

from emergency_alerts.constants import SECURITY_TOPIC

_TRUTHY = {'1', 'true', 'yes', 'on'}


class Settings(BaseModel):
    """Forwarder settings (env vars with defaults)"""
    credentials_path: Optional[str] = None
    project_id: Optional[str] = None
    topic: str = SECURITY_TOPIC
    dry_run: bool = False

    @classmethod
    def from_env(cls) -> 'Settings':
        topic = os.getenv('ALERT_TOPIC', SECURITY_TOPIC).strip()
        if not topic:
            raise ValueError("ALERT_TOPIC must not be empty")

        return cls(
            credentials_path=os.getenv('GOOGLE_APPLICATION_CREDENTIALS') or None,
            project_id=os.getenv('FIREBASE_PROJECT_ID') or None,
            topic=topic,
            dry_run=os.getenv('ALERT_DRY_RUN', 'false').strip().lower() in _TRUTHY,
        )
