"""
Contact persistence: identifier assignment, creation stamping, lookups and soft delete.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone

from contacts.db import DocumentCollection, DocumentNotFoundError
from contacts.documents import ContactDocument
from contacts.results import (
    ContactListResult,
    ContactResult,
    Failed,
    Found,
    Listed,
    NotFound,
)

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


class ContactService:
    """Reads and writes contact documents in a single collection."""

    def __init__(self, collection: DocumentCollection):
        self._collection = collection

    def _read(self, contact_id: str) -> ContactResult:
        document = self._collection.get(contact_id)
        if document is None:
            return NotFound(contact_id=contact_id)
        return Found(contact=ContactDocument.from_document(document))

    def upsert(self, payload: ContactDocument) -> ContactResult:
        """
        Create or fully overwrite the contact at `payload.contact_id`.

        A missing id is replaced by a fresh UUID4. `created` is stamped with
        the current time on every call, including updates of an existing
        record. The returned contact is re-read from the store.
        """
        contact_id = payload.contact_id or str(uuid.uuid4())
        try:
            record = replace(payload, contact_id=contact_id, created=_now_iso())
            self._collection.set(contact_id, record.to_document())
            return self._read(contact_id)
        except Exception as exc:
            logger.exception("Error creating or updating contact %s", contact_id)
            return Failed(operation="upsert", cause=exc)

    def find_all(self) -> ContactListResult:
        """Return every stored contact, soft-deleted ones included, in store order."""
        try:
            contacts = [
                ContactDocument.from_document(document)
                for _, document in self._collection.stream()
            ]
            return Listed(contacts=contacts)
        except Exception as exc:
            logger.exception("Error retrieving all contacts")
            return Failed(operation="find_all", cause=exc)

    def find_one(self, contact_id: str) -> ContactResult:
        try:
            return self._read(contact_id)
        except Exception as exc:
            logger.exception("Error finding contact %s", contact_id)
            return Failed(operation="find_one", cause=exc)

    def delete_one(self, contact_id: str) -> ContactResult:
        """
        Soft-delete: set `deleted` to true and return the updated record.

        Nothing is created when the key does not exist; the result is NotFound.
        """
        try:
            self._collection.update(contact_id, {"deleted": True})
            return self._read(contact_id)
        except DocumentNotFoundError:
            logger.info("Delete requested for missing contact %s", contact_id)
            return NotFound(contact_id=contact_id)
        except Exception as exc:
            logger.exception("Error setting deleted flag on contact %s", contact_id)
            return Failed(operation="delete_one", cause=exc)
