"""Authoritative schema definitions for wireframe components.

Example usage:
    >>> from wireframe_layout.schema import ComponentKind, is_container_kind
    >>> is_container_kind(ComponentKind.ROW)
    True
"""

from .lib import (
    COMPONENT_REGISTRY,
    CONTAINER_KINDS,
    Alignment,
    ComponentCategory,
    ComponentKind,
    ComponentMeta,
    Direction,
    FieldRequirement,
    Orientation,
    Viewport,
    get_component_category,
    get_component_meta,
    get_components_by_category,
    is_container_kind,
    resolve_alias,
)

__all__ = [
    # Enums
    "Alignment",
    "ComponentCategory",
    "ComponentKind",
    "Direction",
    "Orientation",
    "Viewport",
    # Metadata
    "ComponentMeta",
    "FieldRequirement",
    "COMPONENT_REGISTRY",
    "CONTAINER_KINDS",
    # Lookup functions
    "get_component_meta",
    "get_component_category",
    "get_components_by_category",
    "is_container_kind",
    "resolve_alias",
]
