"""
Outcomes returned by ContactService.

Callers can tell a stored record, an absent key and a store failure apart;
only the HTTP layer collapses the last two into an empty response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from contacts.documents import ContactDocument


@dataclass(frozen=True)
class Found:
    contact: ContactDocument


@dataclass(frozen=True)
class Listed:
    contacts: list[ContactDocument] = field(default_factory=list)


@dataclass(frozen=True)
class NotFound:
    contact_id: str


@dataclass(frozen=True)
class Failed:
    """The store raised; `cause` is the original exception."""

    operation: str
    cause: Exception


ContactResult = Union[Found, NotFound, Failed]
ContactListResult = Union[Listed, Failed]
