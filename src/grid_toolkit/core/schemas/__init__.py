"""Schema validation for layout interchange payloads."""

from .validator import LayoutValidationError, validate_layout

__all__ = ["LayoutValidationError", "validate_layout"]
