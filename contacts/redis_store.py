"""
Redis-backed document collection.

Each collection is one Redis hash; hash fields are document keys and values
are JSON-encoded documents.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterator, Optional

import redis

from contacts.db import DocumentNotFoundError


@dataclass
class RedisCollection:
    """Stores documents in a Redis hash named `<key_prefix>:<name>`."""

    url: str
    name: str = "contact"
    key_prefix: str = "contacts"

    def __post_init__(self):
        self.client = redis.Redis.from_url(self.url)
        self.hash_key = f"{self.key_prefix}:{self.name}"

    def get(self, key: str) -> Optional[dict]:
        raw = self.client.hget(self.hash_key, key)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, document: dict) -> None:
        self.client.hset(self.hash_key, key, json.dumps(document, default=str))

    def update(self, key: str, fields: dict) -> None:
        # WATCH the hash so a write landing between read and write retries the merge.
        def _merge(pipe) -> None:
            raw = pipe.hget(self.hash_key, key)
            if raw is None:
                raise DocumentNotFoundError(key)
            current = json.loads(raw)
            current.update(fields)
            pipe.multi()
            pipe.hset(self.hash_key, key, json.dumps(current, default=str))

        self.client.transaction(_merge, self.hash_key)

    def stream(self) -> Iterator[tuple[str, dict]]:
        for key, raw in self.client.hscan_iter(self.hash_key):
            if isinstance(key, bytes):
                key = key.decode("utf-8")
            yield key, json.loads(raw)
