"""Intermediate Representation (IR) models for wireframe component trees."""

from wireframe_layout.ir.lib import (
    LEAF_KINDS,
    Bounds,
    CardNode,
    ColumnNode,
    ComponentNode,
    ContainerNode,
    LeafNode,
    RowNode,
    ScreenNode,
    WireframeDocument,
    export_json_schema,
    iter_nodes,
)

__all__ = [
    # Geometry
    "Bounds",
    # Component variants
    "ComponentNode",
    "ContainerNode",
    "ScreenNode",
    "ColumnNode",
    "RowNode",
    "CardNode",
    "LeafNode",
    "LEAF_KINDS",
    # Document
    "WireframeDocument",
    "export_json_schema",
    "iter_nodes",
]
