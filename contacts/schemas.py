"""
Pydantic schemas for the contacts HTTP API.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from contacts.documents import ContactDocument


class ContactSchema(BaseModel):
    """Contact body for requests and responses. No field is required."""

    model_config = ConfigDict(extra="ignore")

    contactId: Optional[str] = None
    name: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    phoneNumber: Optional[str] = None
    description: Optional[str] = None
    created: Optional[str] = None
    deleted: Optional[bool] = None

    def to_contact(self) -> ContactDocument:
        return ContactDocument.from_document(self.model_dump(exclude_none=True))

    @classmethod
    def from_contact(cls, contact: ContactDocument) -> "ContactSchema":
        return cls(**contact.to_document())
