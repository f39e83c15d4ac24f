"""Wireframe validation utilities."""

from wireframe_layout.validation.lib import (
    ValidationError,
    check_layout_fill,
    is_valid,
    validate_document,
    validate_tree,
)

__all__ = [
    "ValidationError",
    "validate_document",
    "validate_tree",
    "is_valid",
    "check_layout_fill",
]
