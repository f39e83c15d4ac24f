"""wireframe-layout: Flex layout engine for UI wireframe component trees."""

from wireframe_layout.ir import Bounds, WireframeDocument, export_json_schema
from wireframe_layout.layout import (
    LayoutError,
    LayoutResult,
    calculate_layout,
    get_layout_direction,
    get_viewport_dimensions,
    layout_wireframe,
)
from wireframe_layout.validation import (
    ValidationError,
    is_valid,
    validate_document,
    validate_tree,
)

__all__ = [
    # IR
    "Bounds",
    "WireframeDocument",
    "export_json_schema",
    # Layout
    "LayoutError",
    "LayoutResult",
    "calculate_layout",
    "get_layout_direction",
    "get_viewport_dimensions",
    "layout_wireframe",
    # Validation
    "validate_document",
    "validate_tree",
    "is_valid",
    "ValidationError",
]
