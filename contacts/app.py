"""
FastAPI application entry point.

Run with uvicorn: uvicorn contacts.app:app
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from contacts.config import get_settings
from contacts.db import DocumentCollection
from contacts.dependencies import build_contact_collection
from contacts.routes import router
from contacts.service import ContactService


def create_app(collection: Optional[DocumentCollection] = None) -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    if collection is None:
        collection = build_contact_collection(settings)

    app = FastAPI(title="Contacts Backend", version="0.1.0")
    app.state.contact_service = ContactService(collection)
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
