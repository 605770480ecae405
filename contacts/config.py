"""
Configuration and settings for the contacts backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from contacts.documents import CONTACT_COLLECTION


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_prefix: str = Field(default="")
    log_level: str = Field(default="INFO")

    # Which backend holds the contact collection.
    document_store: Literal["memory", "firestore", "sql", "redis"] = Field(
        default="memory"
    )
    contact_collection: str = Field(default=CONTACT_COLLECTION)

    # Firestore
    firestore_credentials: Optional[str] = Field(
        default=None, validation_alias="SA_KEY"
    )
    firestore_project_id: Optional[str] = Field(default=None)

    # SQL (Postgres expected, any SQLAlchemy URL works)
    database_url: Optional[str] = Field(default=None)

    # Redis
    redis_url: Optional[str] = Field(default=None)
    redis_key_prefix: str = Field(default="contacts")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
