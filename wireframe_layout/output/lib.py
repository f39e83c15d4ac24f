"""Output formatting for computed layouts.

Generates a human-readable text tree for review and a JSON structure that a
downstream renderer can draw from without re-running the layout.
"""

import json
from dataclasses import dataclass
from typing import Any

from wireframe_layout.config import get_json_indent
from wireframe_layout.ir import Bounds, ContainerNode, LeafNode, WireframeDocument
from wireframe_layout.layout import (
    LayoutResult,
    WireframeLayout,
    get_layout_direction,
    layout_wireframe,
)
from wireframe_layout.schema import Orientation


@dataclass
class LayoutOutput:
    """Complete output for one document.

    Attributes:
        layout: The computed layout (containers included).
        text_tree: Human-readable tree representation.
        data: JSON-compatible dict for renderers.
    """

    layout: WireframeLayout
    text_tree: str
    data: dict[str, Any]

    def to_json(self, indent: int | None = None) -> str:
        return format_layout_json(self.data, indent)


def bounds_to_dict(bounds: Bounds) -> dict[str, float]:
    """Convert bounds to a plain dict."""
    return bounds.model_dump()


def layout_to_dict(results: list[LayoutResult]) -> list[dict[str, Any]]:
    """Convert layout entries to ``[{"id", "type", "bounds"}]`` in layout order."""
    return [
        {
            "id": result.id,
            "type": result.kind,
            "bounds": bounds_to_dict(result.bounds),
        }
        for result in results
    ]


def wireframe_layout_to_dict(layout: WireframeLayout) -> dict[str, Any]:
    """Convert a whole-document layout to a JSON-compatible dict.

    Example output:
        {
            "width": 423, "height": 664,
            "screens": [{"id": "login", "name": "Login", "index": 0,
                         "bounds": {...}, "label_y": 24}],
            "nodes": [{"id": "submit", "type": "button", "bounds": {...}}]
        }
    """
    return {
        "width": layout.dimensions.width,
        "height": layout.dimensions.height,
        "screens": [
            {
                "id": frame.screen.id,
                "name": frame.screen.name,
                "index": frame.index,
                "bounds": bounds_to_dict(frame.bounds),
                "label_y": frame.label_y,
            }
            for frame in layout.frames
        ],
        "nodes": layout_to_dict(layout.results),
    }


def format_layout_json(data: Any, indent: int | None = None) -> str:
    """Serialize layout data as JSON.

    Args:
        data: Output of ``layout_to_dict`` or ``wireframe_layout_to_dict``.
        indent: Indentation override. Defaults to WIREFRAME_JSON_INDENT.
    """
    return json.dumps(data, indent=get_json_indent(indent))


def _fmt(value: float) -> str:
    return f"{round(value, 2):g}"


def format_layout_tree(
    node: ContainerNode | LeafNode,
    placements: dict[int, Bounds] | None = None,
) -> str:
    """Format a component tree as a human-readable tree.

    Example output:
        Dashboard [screen] (16, 48) 375x600
        ├── appbar [appbar, flex 0] (24, 56) 359x56
        ├── body [row, horizontal] (24, 120) 359x448
        │   ├── sidebar [navmenu, flex 0] (24, 120) 160x448
        │   └── main [col] (196, 120) 187x448
        └── tabs [bottomnav, flex 0] (24, 576) 359x64

    Args:
        node: Root node to format.
        placements: Computed bounds keyed by ``id(node)``. Nodes without an
            entry are printed without bounds.

    Returns:
        Formatted tree string.
    """
    lines: list[str] = []
    _format_node(node, placements or {}, lines, "", is_last=True, is_root=True)
    return "\n".join(lines)


def _format_node(
    node: ContainerNode | LeafNode,
    placements: dict[int, Bounds],
    lines: list[str],
    prefix: str,
    is_last: bool,
    is_root: bool = False,
) -> None:
    """Recursively format a node and its children."""
    if is_root:
        connector = ""
        child_prefix = ""
    else:
        connector = "└── " if is_last else "├── "
        child_prefix = prefix + ("    " if is_last else "│   ")

    label = (
        node.label
        or getattr(node, "name", None)
        or getattr(node, "title", None)
        or node.id
    )

    attrs = [node.type]
    if node.is_container and get_layout_direction(node.type) == Orientation.HORIZONTAL:
        attrs.append("horizontal")
    if node.flex != 1:
        attrs.append(f"flex {_fmt(node.flex)}")

    node_str = f"{label} [{', '.join(attrs)}]"
    bounds = placements.get(id(node))
    if bounds is not None:
        node_str += (
            f" ({_fmt(bounds.x)}, {_fmt(bounds.y)}) "
            f"{_fmt(bounds.width)}x{_fmt(bounds.height)}"
        )
    lines.append(f"{prefix}{connector}{node_str}")

    if node.is_container:
        for i, child in enumerate(node.children):
            is_last_child = i == len(node.children) - 1
            _format_node(child, placements, lines, child_prefix, is_last_child)


def format_wireframe_tree(layout: WireframeLayout) -> str:
    """Format every screen of a document layout, separated by blank lines."""
    placements = {id(result.node): result.bounds for result in layout.results}
    header = f"Canvas {_fmt(layout.dimensions.width)}x{_fmt(layout.dimensions.height)}"
    trees = [format_layout_tree(frame.screen, placements) for frame in layout.frames]
    return "\n\n".join([header, *trees])


def generate_output(document: WireframeDocument) -> LayoutOutput:
    """Lay out a document and produce both output forms.

    Raises:
        InvalidScreenCountError: If the document has no screens.
    """
    layout = layout_wireframe(document, include_containers=True)
    return LayoutOutput(
        layout=layout,
        text_tree=format_wireframe_tree(layout),
        data=wireframe_layout_to_dict(layout),
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
