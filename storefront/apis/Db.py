"""Project database class with Firebase operations."""

import logging
from firebase_admin import firestore, storage
from typing import Dict, Any, Optional
from datetime import datetime, timezone
from abc import ABC

from storefront.config.env_loader import get_storefront_config


class Db(ABC):
    """Database operations base class.

    One instance per class (singleton). Collections are registered in
    ``_init_collections``; storage helpers operate on the app's default bucket
    unless ``FIREBASE_STORAGE_BUCKET`` names another one.
    """
    _instances: Dict[str, Any] = {}  # Class registry for singleton instances

    collections: Dict[str, Any] = {}

    def __new__(cls, *args, **kwargs):
        """Ensure only one instance per class exists"""
        if cls.__name__ not in cls._instances:
            cls._instances[cls.__name__] = super().__new__(cls)
        return cls._instances[cls.__name__]

    def __init__(self):
        """Initialize the database - only runs once per class due to singleton"""
        if hasattr(self, "_initialized"):
            return

        self._init_firestore()
        self._init_collections()
        self._initialized = True

    def _init_firestore(self):
        """Initialize Firestore client and base configuration."""
        self.firestore = firestore.client()
        self.logger = logging.getLogger("firebase-functions")
        self.logger.info("Firestore initialized")

    def _init_collections(self):
        """Initialize collection references."""
        self.collections = {
            # Role Records keyed by auth uid
            "users": self.firestore.collection("users"),
            "products": self.firestore.collection("products"),
        }

    @classmethod
    def get_instance(cls):
        """Get or create the singleton instance for this class"""
        return cls()

    # Storage functions
    @staticmethod
    def bucket(name: Optional[str] = None):
        return storage.bucket(name or get_storefront_config()["storage_bucket"] or None)

    @staticmethod
    def is_development():
        return get_storefront_config()["env"] == "development"

    # Timestamp functions
    @staticmethod
    def timestamp_now():
        return datetime.now(timezone.utc)

    @staticmethod
    def get_created_at():
        return datetime.now(timezone.utc)
