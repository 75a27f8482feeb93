"""
Serialization Utilities

Provides to/from JSON utilities for layouts.

- `serialize_layout` / `deserialize_layout` for in-memory payloads
- `dumps_layout` / `loads_layout` for JSON text
- Validation via schemas before deserialization

Layouts are exchanged, not stored: nothing here touches the filesystem.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from ..models.items import GridItem, Layout
from ..schemas.validator import validate_layout


def serialize_layout(layout: Sequence[GridItem]) -> list[dict[str, Any]]:
    """
    Serialize a layout to a list of dictionaries.

    The output passes schema validation for any layout whose items
    satisfy their invariants.
    """
    return [item.to_dict() for item in layout]


def deserialize_layout(data: list[dict[str, Any]], *, validate: bool = True) -> Layout:
    """
    Deserialize a layout from a list of dictionaries.

    Args:
        data: Decoded JSON payload
        validate: Whether to validate against the schema first

    Returns:
        Layout tuple in payload order

    Raises:
        LayoutValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_layout(data)
    return tuple(GridItem.from_dict(entry) for entry in data)


def dumps_layout(layout: Sequence[GridItem], **kwargs: Any) -> str:
    """Serialize a layout to JSON text."""
    return json.dumps(serialize_layout(layout), **kwargs)


def loads_layout(text: str, *, validate: bool = True) -> Layout:
    """Deserialize a layout from JSON text."""
    return deserialize_layout(json.loads(text), validate=validate)
