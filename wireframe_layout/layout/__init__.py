"""Wireframe layout engine.

Example usage:
    >>> from wireframe_layout.ir import Bounds, LeafNode, RowNode
    >>> from wireframe_layout.layout import calculate_layout
    >>> row = RowNode(id="row", children=[
    ...     LeafNode(id="a", type="button", label="A"),
    ...     LeafNode(id="b", type="button", label="B"),
    ... ])
    >>> [r.bounds.width for r in calculate_layout(row, Bounds(width=300, height=50))]
    [150.0, 150.0]
"""

from .errors import (
    InvalidScreenCountError,
    InvalidTreeError,
    LayoutError,
    UnknownKindError,
)
from .flex import (
    apply_padding,
    clamp,
    distribute,
    get_layout_direction,
    sanitize_bounds,
)
from .lib import (
    LayoutResult,
    WireframeLayout,
    calculate_layout,
    layout_bounds_by_id,
    layout_wireframe,
)
from .viewport import (
    BASE_HEIGHT,
    LABEL_SPACE,
    SCREEN_GAP,
    SCREEN_PADDING,
    VIEWPORT_WIDTHS,
    Dimensions,
    ScreenFrame,
    get_screen_box,
    get_screen_frames,
    get_screen_origin,
    get_screen_size,
    get_viewport_dimensions,
)

__all__ = [
    # Errors
    "LayoutError",
    "UnknownKindError",
    "InvalidTreeError",
    "InvalidScreenCountError",
    # Direction and distribution
    "get_layout_direction",
    "apply_padding",
    "distribute",
    "clamp",
    "sanitize_bounds",
    # Walker
    "LayoutResult",
    "WireframeLayout",
    "calculate_layout",
    "layout_bounds_by_id",
    "layout_wireframe",
    # Viewport
    "VIEWPORT_WIDTHS",
    "BASE_HEIGHT",
    "SCREEN_GAP",
    "SCREEN_PADDING",
    "LABEL_SPACE",
    "Dimensions",
    "ScreenFrame",
    "get_screen_size",
    "get_screen_box",
    "get_viewport_dimensions",
    "get_screen_origin",
    "get_screen_frames",
]
