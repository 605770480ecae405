"""
Document collection abstraction with SQL and in-memory implementations.

Firestore and Redis implementations live in `contacts.firestore` and
`contacts.redis_store`.
"""

from __future__ import annotations

import json
import time
from typing import Dict, Iterator, Optional, Protocol

from sqlalchemy import JSON, Column, Float, String, create_engine, select
from sqlalchemy.orm import Session, declarative_base, sessionmaker


class DocumentNotFoundError(KeyError):
    """Raised by `update` when no document exists at the key."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key


class DocumentCollection(Protocol):
    """Interface for a key-addressed collection of JSON-like documents."""

    def get(self, key: str) -> Optional[dict]:
        ...

    def set(self, key: str, document: dict) -> None:
        ...

    def update(self, key: str, fields: dict) -> None:
        ...

    def stream(self) -> Iterator[tuple[str, dict]]:
        ...


class InMemoryCollection:
    """Simple in-memory collection for development and tests."""

    def __init__(self, name: str = "contact"):
        self.name = name
        self.documents: Dict[str, dict] = {}

    @staticmethod
    def _copy(document: dict) -> dict:
        # Round-trip through JSON to mimic what a real store persists.
        return json.loads(json.dumps(document, default=str))

    def get(self, key: str) -> Optional[dict]:
        document = self.documents.get(key)
        return self._copy(document) if document is not None else None

    def set(self, key: str, document: dict) -> None:
        self.documents[key] = self._copy(document)

    def update(self, key: str, fields: dict) -> None:
        if key not in self.documents:
            raise DocumentNotFoundError(key)
        self.documents[key] = {**self.documents[key], **self._copy(fields)}

    def stream(self) -> Iterator[tuple[str, dict]]:
        for key, document in list(self.documents.items()):
            yield key, self._copy(document)

    def reset(self) -> None:
        """Clear all stored documents (useful in tests)."""
        self.documents.clear()


class SqlCollection:
    """
    SQLAlchemy-backed collection. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str, name: str = "contact"):
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlCollection")
        self.name = name
        self.engine = create_engine(
            database_url,
            future=True,
            pool_pre_ping=True,
            pool_recycle=1800,
        )
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    def get(self, key: str) -> Optional[dict]:
        with self.Session() as session:
            row = session.get(DocumentRow, (self.name, key))
            return dict(row.data) if row else None

    def set(self, key: str, document: dict) -> None:
        with self.Session() as session:
            row = session.get(DocumentRow, (self.name, key))
            if row:
                row.data = dict(document)
                row.updated_at = time.time()
            else:
                session.add(
                    DocumentRow(
                        collection=self.name,
                        key=key,
                        data=dict(document),
                        updated_at=time.time(),
                    )
                )
            session.commit()

    def update(self, key: str, fields: dict) -> None:
        with self.Session() as session:
            row = session.get(DocumentRow, (self.name, key), with_for_update=True)
            if not row:
                raise DocumentNotFoundError(key)
            # Assign a new dict so the JSON column is flagged dirty.
            row.data = {**row.data, **fields}
            row.updated_at = time.time()
            session.commit()

    def stream(self) -> Iterator[tuple[str, dict]]:
        with self.Session() as session:
            stmt = select(DocumentRow).where(DocumentRow.collection == self.name)
            rows = session.execute(stmt).scalars().all()
            documents = [(row.key, dict(row.data)) for row in rows]
        yield from documents


Base = declarative_base()


class DocumentRow(Base):
    __tablename__ = "documents"

    collection = Column(String, primary_key=True)
    key = Column(String, primary_key=True)
    data = Column(JSON, nullable=False)
    updated_at = Column(Float, nullable=False)
