"""
Schema Validation Utilities

Validates layout payloads (lists of item dicts) before they are turned
into GridItems.

Two stages:
- JSON Schema (`layout.schema.json`) for structure and types
- Cross-item checks the schema cannot express (unique ids, min <= max)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class LayoutValidationError(Exception):
    """Raised when a layout payload fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_layout(data: Any) -> None:
    """
    Validate a layout payload.

    Args:
        data: Decoded JSON, expected to be a list of item objects

    Raises:
        LayoutValidationError: If data is invalid
    """
    schema = _load_schema("layout")
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if errors:
        first = errors[0]
        raise LayoutValidationError(
            f"Schema validation failed: {first.message}",
            path=".".join(str(p) for p in first.absolute_path),
            errors=[e.message for e in errors],
        )

    seen: set[str] = set()
    for index, entry in enumerate(data):
        item_id = entry["id"]
        if item_id in seen:
            raise LayoutValidationError(
                f"Duplicate item id: {item_id!r}",
                path=f"{index}.id",
            )
        seen.add(item_id)

        for axis in ("w", "h"):
            low, high = entry.get(f"min_{axis}"), entry.get(f"max_{axis}")
            if low is not None and high is not None and low > high:
                raise LayoutValidationError(
                    f"Item {item_id!r}: min_{axis}={low} exceeds max_{axis}={high}",
                    path=f"{index}.min_{axis}",
                )
