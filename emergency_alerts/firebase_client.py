"""
Firebase Admin app singleton
Initialized once per process, then injected into publishers
"""
import logging
from typing import Optional

import firebase_admin
from firebase_admin import credentials

from emergency_alerts.config import Settings

logger = logging.getLogger(__name__)


class FirebaseClient:
    """Holds the process-wide firebase_admin App"""

    _instance: Optional[firebase_admin.App] = None

    @classmethod
    def get_app(cls, settings: Optional[Settings] = None) -> firebase_admin.App:
        """Get or create the default Firebase app"""
        if cls._instance is None:
            settings = settings or Settings.from_env()

            # Cloud Functions provides application default credentials
            if settings.credentials_path:
                cred = credentials.Certificate(settings.credentials_path)
            else:
                cred = credentials.ApplicationDefault()

            options = {'projectId': settings.project_id} if settings.project_id else None
            cls._instance = firebase_admin.initialize_app(cred, options)
            logger.info(f"Firebase app initialized (project: {settings.project_id or 'default'})")

        return cls._instance

    @classmethod
    def reset(cls):
        """Delete the app so the next get_app() starts fresh"""
        if cls._instance:
            firebase_admin.delete_app(cls._instance)
            cls._instance = None
            logger.info("Firebase app deleted")
