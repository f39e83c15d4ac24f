"""Output formatting for layout visualization."""

from wireframe_layout.output.lib import (
    LayoutOutput,
    bounds_to_dict,
    format_layout_json,
    format_layout_tree,
    format_wireframe_tree,
    generate_output,
    layout_to_dict,
    wireframe_layout_to_dict,
)

__all__ = [
    "LayoutOutput",
    "bounds_to_dict",
    "layout_to_dict",
    "wireframe_layout_to_dict",
    "format_layout_json",
    "format_layout_tree",
    "format_wireframe_tree",
    "generate_output",
]
