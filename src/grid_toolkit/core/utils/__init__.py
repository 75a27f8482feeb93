"""Interchange helpers for layouts."""

from .serialization import deserialize_layout, dumps_layout, loads_layout, serialize_layout

__all__ = ["serialize_layout", "deserialize_layout", "dumps_layout", "loads_layout"]
