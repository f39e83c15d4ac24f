"""Wireframe validation and static analysis.

Two levels of checks are provided:

- ``validate_document`` inspects raw wireframe JSON before it is parsed into
  models and reports every problem with a JSON path such as
  ``screens[0].children[2].bounds.x``.
- ``validate_tree`` and ``check_layout_fill`` inspect parsed component trees
  for duplicate ids, cycles, out-of-range numbers and containers whose
  children do not fill their content area.
"""

import json
import math
from dataclasses import dataclass
from typing import Any

from wireframe_layout.config import get_float_tolerance
from wireframe_layout.ir import Bounds, ContainerNode, LeafNode, iter_nodes
from wireframe_layout.layout import (
    apply_padding,
    calculate_layout,
    clamp,
    get_layout_direction,
)
from wireframe_layout.schema import (
    Direction,
    Orientation,
    Viewport,
    get_component_meta,
    resolve_alias,
)

_BOUNDS_FIELDS = ("x", "y", "width", "height")


@dataclass
class ValidationError:
    """Represents a validation error in a wireframe.

    Attributes:
        path: JSON path of the offending value, or the node id for tree checks.
        message: Human-readable error description.
        error_type: Category of the error.
    """

    path: str
    message: str
    error_type: str


# =============================================================================
# Raw document checks
# =============================================================================


def validate_document(content: str | bytes | dict[str, Any]) -> list[ValidationError]:
    """Validate raw wireframe JSON.

    Performs the following checks:
        - Root ``viewport`` and ``direction`` present and known
        - ``screens`` is a list of screen components
        - Every component has a non-empty string ``id`` and a known ``type``
        - Every component has ``bounds`` with numeric x, y, width, height
        - Kind-specific fields (screen name, button label, text content,
          list items, container children)
        - Ids are unique across the document

    Args:
        content: JSON text or an already decoded dict.

    Returns:
        list[ValidationError]: Errors in document order (empty if valid).

    Example:
        >>> errors = validate_document('{"viewport": "watch"}')
        >>> errors[0].path
        'viewport'
    """
    if isinstance(content, (str, bytes)):
        try:
            content = json.loads(content)
        except json.JSONDecodeError as e:
            return [
                ValidationError(
                    path="",
                    message=f"Invalid JSON: {e}",
                    error_type="invalid_json",
                )
            ]

    if not isinstance(content, dict):
        return [
            ValidationError(
                path="",
                message="Wireframe must be a JSON object",
                error_type="invalid_type",
            )
        ]

    errors: list[ValidationError] = []
    errors.extend(_validate_enum_field(content, "viewport", Viewport))
    errors.extend(_validate_enum_field(content, "direction", Direction))

    screens = content.get("screens")
    if not isinstance(screens, list):
        errors.append(
            ValidationError(
                path="screens",
                message="screens must be an array",
                error_type="invalid_type",
            )
        )
        return errors

    seen_ids: dict[str, str] = {}
    for i, screen in enumerate(screens):
        path = f"screens[{i}]"
        if isinstance(screen, dict) and screen.get("type") not in (None, "screen"):
            errors.append(
                ValidationError(
                    path=path,
                    message=f"Top-level component must be a screen, got '{screen.get('type')}'",
                    error_type="invalid_type",
                )
            )
            continue
        errors.extend(_validate_component(screen, path, seen_ids))

    return errors


def _validate_enum_field(content: dict[str, Any], name: str, enum_cls) -> list[ValidationError]:
    value = content.get(name)
    if not value:
        return [
            ValidationError(
                path=name,
                message=f"Missing required field '{name}'",
                error_type="missing_field",
            )
        ]

    allowed = [member.value for member in enum_cls]
    if value not in allowed:
        choices = ", ".join(f"'{v}'" for v in allowed)
        return [
            ValidationError(
                path=name,
                message=f"Invalid {name} '{value}': must be one of {choices}",
                error_type="invalid_value",
            )
        ]
    return []


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_blank(value: Any) -> bool:
    return not (value.strip() if isinstance(value, str) else value)


def _validate_bounds(bounds: Any, path: str) -> list[ValidationError]:
    if not isinstance(bounds, dict):
        return [
            ValidationError(
                path=path,
                message="Missing required field 'bounds'",
                error_type="missing_field",
            )
        ]

    return [
        ValidationError(
            path=f"{path}.bounds.{name}",
            message=f"bounds.{name} must be a number",
            error_type="invalid_type",
        )
        for name in _BOUNDS_FIELDS
        if not _is_number(bounds.get(name))
    ]


def _validate_component(
    component: Any,
    path: str,
    seen_ids: dict[str, str],
) -> list[ValidationError]:
    """Validate one raw component and, for containers, its children."""
    if not isinstance(component, dict):
        return [
            ValidationError(
                path=path,
                message="Component must be a JSON object",
                error_type="invalid_type",
            )
        ]

    node_id = component.get("id")
    if not isinstance(node_id, str) or not node_id.strip():
        return [
            ValidationError(
                path=path,
                message="Missing or invalid required field 'id'",
                error_type="missing_field",
            )
        ]

    kind = component.get("type")
    if not isinstance(kind, str) or not kind:
        return [
            ValidationError(
                path=path,
                message="Missing required field 'type'",
                error_type="missing_field",
            )
        ]

    try:
        meta = get_component_meta(kind)
    except KeyError:
        message = f"Unknown component type '{kind}'"
        suggestion = resolve_alias(kind)
        if suggestion is not None:
            message += f" (did you mean '{suggestion.value}'?)"
        return [ValidationError(path=path, message=message, error_type="unknown_type")]

    errors: list[ValidationError] = []

    if node_id in seen_ids:
        errors.append(
            ValidationError(
                path=path,
                message=f"Duplicate ID '{node_id}' (first defined at {seen_ids[node_id]})",
                error_type="duplicate_id",
            )
        )
    else:
        seen_ids[node_id] = path

    errors.extend(_validate_bounds(component.get("bounds"), path))

    for requirement in meta.required_fields:
        value = component.get(requirement.name)
        if not isinstance(value, requirement.value_type) or (
            not requirement.allow_empty and _is_blank(value)
        ):
            errors.append(
                ValidationError(
                    path=path,
                    message=f"Missing required field '{requirement.name}' for {kind} component",
                    error_type="missing_field",
                )
            )

    if meta.is_container:
        children = component.get("children")
        if not isinstance(children, list):
            errors.append(
                ValidationError(
                    path=path,
                    message=f"Missing required field 'children' for {kind} component",
                    error_type="missing_field",
                )
            )
        else:
            for i, child in enumerate(children):
                errors.extend(_validate_component(child, f"{path}.children[{i}]", seen_ids))

    return errors


# =============================================================================
# Parsed tree checks
# =============================================================================


def validate_tree(node: ContainerNode | LeafNode) -> list[ValidationError]:
    """Validate a component tree for structural issues.

    Performs the following checks:
        - Unique ID enforcement (no duplicate IDs)
        - Flex, gap and padding are finite and non-negative
        - Cycle detection (no node is ancestor of itself)

    Args:
        node: The root node to validate.

    Returns:
        list[ValidationError]: List of validation errors (empty if valid).
    """
    cycle_errors = _detect_cycles(node)
    if cycle_errors:
        # The remaining checks walk the tree and would not terminate.
        return cycle_errors

    errors: list[ValidationError] = []

    id_counts: dict[str, int] = {}
    for n in iter_nodes(node):
        id_counts[n.id] = id_counts.get(n.id, 0) + 1

    for node_id, count in id_counts.items():
        if count > 1:
            errors.append(
                ValidationError(
                    path=node_id,
                    message=f"Duplicate ID '{node_id}' appears {count} times",
                    error_type="duplicate_id",
                )
            )

    errors.extend(_validate_numbers(node))
    return errors


def is_valid(node: ContainerNode | LeafNode) -> bool:
    """Check if a component tree is valid.

    Convenience function that returns True if no validation errors exist.
    """
    return not validate_tree(node)


def _validate_numbers(node: ContainerNode | LeafNode) -> list[ValidationError]:
    """Report numbers the layout engine would clamp to zero."""
    errors: list[ValidationError] = []

    for n in iter_nodes(node):
        fields = {"flex": n.flex}
        if n.is_container:
            fields["gap"] = n.gap
            fields["padding"] = n.padding
        for name, value in fields.items():
            if not math.isfinite(value) or value < 0:
                errors.append(
                    ValidationError(
                        path=n.id,
                        message=f"{name} {value} must be a finite non-negative number",
                        error_type="invalid_number",
                    )
                )

    return errors


def _detect_cycles(node: ContainerNode | LeafNode) -> list[ValidationError]:
    """Detect nodes that are their own ancestor.

    Parsed documents cannot contain cycles, but trees assembled in code can.
    """
    errors: list[ValidationError] = []
    visited: set[int] = set()

    def _check(n, path: set[int]) -> None:
        obj_id = id(n)
        if obj_id in path:
            errors.append(
                ValidationError(
                    path=n.id,
                    message=f"Cycle detected: node '{n.id}' is its own ancestor",
                    error_type="cycle",
                )
            )
            return
        if obj_id in visited or not n.is_container:
            return
        visited.add(obj_id)
        path.add(obj_id)
        for child in n.children:
            _check(child, path)
        path.remove(obj_id)

    _check(node, set())
    return errors


def check_layout_fill(
    node: ContainerNode | LeafNode,
    bounds: Bounds,
    tolerance: float | None = None,
) -> list[ValidationError]:
    """Verify that computed child bounds fill every container.

    For each container with at least one flexible child whose fixed
    children fit, the children's main-axis sizes plus the gaps between them
    must equal the content extent, and no child may be wider on the cross
    axis than the content area unless its own size hint asks for more.

    Args:
        node: Root of the tree.
        bounds: Bounds available to the root.
        tolerance: Allowed float error. Defaults to WIREFRAME_FLOAT_TOLERANCE.

    Returns:
        list[ValidationError]: One error per violating container or child.

    Raises:
        InvalidTreeError: If the tree contains a cycle.
    """
    tolerance = get_float_tolerance(tolerance)
    placed = {
        id(result.node): result.bounds
        for result in calculate_layout(node, bounds, include_containers=True)
    }

    errors: list[ValidationError] = []
    for container in iter_nodes(node):
        if not container.is_container or not container.children:
            continue

        content = apply_padding(placed[id(container)], container.padding)
        horizontal = get_layout_direction(container.type) == Orientation.HORIZONTAL
        main_extent = content.width if horizontal else content.height
        cross_extent = content.height if horizontal else content.width
        gap = clamp(container.gap)
        gaps = gap * (len(container.children) - 1)

        fixed = 0.0
        has_flexible = False
        for child in container.children:
            hint = child.bounds or Bounds()
            if clamp(child.flex) == 0:
                fixed += clamp(hint.width if horizontal else hint.height)
            else:
                has_flexible = True

        if has_flexible and fixed + gaps <= main_extent:
            used = gaps
            for child in container.children:
                child_bounds = placed[id(child)]
                used += child_bounds.width if horizontal else child_bounds.height
            if abs(used - main_extent) > tolerance:
                errors.append(
                    ValidationError(
                        path=container.id,
                        message=(
                            f"Children of {container.type} '{container.id}' span "
                            f"{used:g}px of {main_extent:g}px"
                        ),
                        error_type="fill_mismatch",
                    )
                )

        for child in container.children:
            child_bounds = placed[id(child)]
            hint = child.bounds or Bounds()
            requested = clamp(hint.height if horizontal else hint.width)
            cross = child_bounds.height if horizontal else child_bounds.width
            if cross > cross_extent + tolerance and cross > requested + tolerance:
                errors.append(
                    ValidationError(
                        path=child.id,
                        message=(
                            f"'{child.id}' is {cross:g}px across but its parent "
                            f"offers {cross_extent:g}px"
                        ),
                        error_type="cross_overflow",
                    )
                )

    return errors


__all__ = [
    "ValidationError",
    "validate_document",
    "validate_tree",
    "is_valid",
    "check_layout_fill",
]
