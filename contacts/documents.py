"""
Contact document record and its storage representation.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

from dacite import Config, from_dict

from contacts.json_utils import convert_keys

CONTACT_COLLECTION = "contact"


@dataclass
class ContactDocument:
    """A contact as stored in the document collection. Every field is optional."""

    contact_id: Optional[str] = None
    name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    description: Optional[str] = None
    created: Optional[str] = None
    deleted: Optional[bool] = None

    def to_document(self) -> dict[str, Any]:
        """Return the camelCase storage dict, leaving out unset fields."""
        fields = {key: value for key, value in asdict(self).items() if value is not None}
        return convert_keys(fields, "snake_to_camel")

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "ContactDocument":
        # Unknown keys are dropped; check_types is off because stores may
        # hand back their own value types.
        return from_dict(
            data_class=cls,
            data=convert_keys(data, "camel_to_snake"),
            config=Config(check_types=False),
        )
