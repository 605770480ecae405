"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from fastapi import Request

from contacts.config import Settings
from contacts.db import DocumentCollection, InMemoryCollection, SqlCollection
from contacts.service import ContactService

logger = logging.getLogger(__name__)


def build_contact_collection(settings: Settings) -> DocumentCollection:
    """Create the contact collection for the configured backend."""
    name = settings.contact_collection
    store = settings.document_store

    if store == "firestore":
        from contacts.firestore import FirestoreCollection, create_firestore_client

        collection = FirestoreCollection(create_firestore_client(settings), name)
    elif store == "sql":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when DOCUMENT_STORE=sql")
        collection = SqlCollection(settings.database_url, name)
    elif store == "redis":
        if not settings.redis_url:
            raise ValueError("REDIS_URL is required when DOCUMENT_STORE=redis")
        from contacts.redis_store import RedisCollection

        collection = RedisCollection(
            url=settings.redis_url, name=name, key_prefix=settings.redis_key_prefix
        )
    else:
        collection = InMemoryCollection(name)

    logger.info(
        "Contact collection %r backed by %s", name, collection.__class__.__name__
    )
    return collection


def get_contact_service(request: Request) -> ContactService:
    """Return the service built at startup."""
    return request.app.state.contact_service
