"""
Firestore-backed document collection.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

import firebase_admin
from firebase_admin import credentials, firestore
from google.api_core import exceptions

from contacts.config import Settings
from contacts.db import DocumentNotFoundError

logger = logging.getLogger(__name__)


def create_firestore_client(settings: Settings):
    """
    Initialize the default firebase_admin app once and return its Firestore client.

    Uses the service-account key file from SA_KEY when set, application
    default credentials otherwise.
    """
    try:
        app = firebase_admin.get_app()
    except ValueError:
        if settings.firestore_credentials:
            cred = credentials.Certificate(settings.firestore_credentials)
        else:
            cred = credentials.ApplicationDefault()
        options = {}
        if settings.firestore_project_id:
            options["projectId"] = settings.firestore_project_id
        app = firebase_admin.initialize_app(cred, options)
        logger.info("Initialized firebase app for project %s", app.project_id)
    return firestore.client(app)


class FirestoreCollection:
    """Adapts a Firestore collection reference to the DocumentCollection interface."""

    def __init__(self, db, name: str = "contact"):
        self.name = name
        self._collection = db.collection(name)

    def get(self, key: str) -> Optional[dict]:
        snapshot = self._collection.document(key).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict()

    def set(self, key: str, document: dict) -> None:
        self._collection.document(key).set(document)

    def update(self, key: str, fields: dict) -> None:
        try:
            self._collection.document(key).update(fields)
        except exceptions.NotFound as exc:
            raise DocumentNotFoundError(key) from exc

    def stream(self) -> Iterator[tuple[str, dict]]:
        for snapshot in self._collection.stream():
            yield snapshot.id, snapshot.to_dict()
