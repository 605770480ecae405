"""
Key-case conversion for JSON-like payloads.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic.alias_generators import to_camel, to_snake


def convert_keys(
    data: Any, direction: Literal["camel_to_snake", "snake_to_camel"]
) -> Any:
    """
    Recursively rename dict keys in `data`.

    Lists are walked element by element; non-string keys and scalar values
    are left untouched.
    """
    if direction == "camel_to_snake":
        convert = to_snake
    elif direction == "snake_to_camel":
        convert = to_camel
    else:
        raise ValueError(f"Unknown conversion direction: {direction}")

    if isinstance(data, dict):
        return {
            (convert(key) if isinstance(key, str) else key): convert_keys(
                value, direction
            )
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [convert_keys(item, direction) for item in data]
    return data
