"""Flex distribution along a single axis.

Implements the two-pass algorithm that places a container's children:

1. Measure: fixed children (``flex == 0``) reserve their explicit main-axis
   size; flexible children accumulate their weights.
2. Assign: the space left after gaps and fixed sizes is split by weight,
   children are placed in order along the main axis and aligned on the
   cross axis.

Numbers are never rejected. Negative, NaN or infinite sizes, gaps, paddings
and weights are clamped to ``0`` so that layout always terminates with
finite, non-negative bounds.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from wireframe_layout.ir import Bounds
from wireframe_layout.schema import Alignment, ComponentKind, Orientation

from .errors import UnknownKindError


def clamp(value: float | None) -> float:
    """Clamp a number to a finite, non-negative float."""
    if value is None or not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


def sanitize_bounds(bounds: Bounds) -> Bounds:
    """Return ``bounds`` with every field clamped."""
    return Bounds(
        x=clamp(bounds.x),
        y=clamp(bounds.y),
        width=clamp(bounds.width),
        height=clamp(bounds.height),
    )


def get_layout_direction(kind: ComponentKind | str) -> Orientation:
    """Resolve the main axis of a component kind.

    ``row`` lays out horizontally; ``col``, ``screen`` and ``card`` lay out
    vertically. Leaf kinds have no children but resolve to vertical.

    Raises:
        UnknownKindError: If ``kind`` is not a known component kind.
    """
    try:
        kind = ComponentKind(kind)
    except ValueError:
        raise UnknownKindError(kind) from None

    match kind:
        case ComponentKind.ROW:
            return Orientation.HORIZONTAL
        case _:
            return Orientation.VERTICAL


def apply_padding(bounds: Bounds, padding: float) -> Bounds:
    """Shrink ``bounds`` by ``padding`` on all four sides.

    Extents never go below zero when the padding exceeds the bounds.
    """
    padding = clamp(padding)
    return Bounds(
        x=bounds.x + padding,
        y=bounds.y + padding,
        width=max(0.0, bounds.width - padding * 2),
        height=max(0.0, bounds.height - padding * 2),
    )


@dataclass(frozen=True)
class _Measure:
    main: float
    cross: float
    flex: float
    align: Alignment


def _measure(child, horizontal: bool) -> _Measure:
    hint = child.bounds or Bounds()
    width = clamp(hint.width)
    height = clamp(hint.height)
    return _Measure(
        main=width if horizontal else height,
        cross=height if horizontal else width,
        flex=clamp(child.flex),
        align=Alignment(child.align),
    )


def _cross_offset(align: Alignment, cross_total: float, cross_size: float) -> float:
    match align:
        case Alignment.CENTER:
            offset = (cross_total - cross_size) / 2
        case Alignment.END:
            offset = cross_total - cross_size
        case _:
            offset = 0.0
    return offset


def distribute(
    content: Bounds,
    orientation: Orientation | str,
    children: Sequence,
    gap: float = 0,
) -> list[Bounds]:
    """Compute the absolute bounds of each child inside a content area.

    Args:
        content: The container's content area (bounds minus padding).
        orientation: Main-axis direction.
        children: Ordered child nodes; each exposes ``bounds`` (size hint),
            ``flex`` and ``align``.
        gap: Spacing between adjacent children.

    Returns:
        One Bounds per child, in the same order.

    Example:
        >>> row = Bounds(width=400, height=50)
        >>> fixed = LeafNode(id="a", type="icon", flex=0, bounds=Bounds(width=200))
        >>> fill = LeafNode(id="b", type="text")
        >>> [b.width for b in distribute(row, "horizontal", [fixed, fill])]
        [200.0, 200.0]
    """
    if not children:
        return []

    horizontal = Orientation(orientation) == Orientation.HORIZONTAL
    gap = clamp(gap)

    main_start = content.x if horizontal else content.y
    cross_start = content.y if horizontal else content.x
    main_extent = clamp(content.width if horizontal else content.height)
    cross_total = clamp(content.height if horizontal else content.width)

    # Pass 1: fixed space and total flex weight
    measures = [_measure(child, horizontal) for child in children]
    fixed_space = 0.0
    total_flex = 0.0
    for m in measures:
        if m.flex == 0:
            fixed_space += m.main
        else:
            total_flex += m.flex

    main_total = main_extent - gap * (len(children) - 1)
    flex_space = max(0.0, main_total - fixed_space)
    space_per_flex = flex_space / total_flex if total_flex > 0 else 0.0

    # Pass 2: assign sizes and positions in order
    results: list[Bounds] = []
    offset = main_start

    for m in measures:
        if m.flex == 0:
            # With no flexible siblings this fallback is 0.
            main_size = m.main if m.main > 0 else space_per_flex
        else:
            main_size = space_per_flex * m.flex

        cross_size = m.cross if m.cross > 0 else cross_total
        # Oversized children may overhang their parent but never leave the canvas.
        cross_pos = max(
            0.0, cross_start + _cross_offset(m.align, cross_total, cross_size)
        )

        if horizontal:
            results.append(
                Bounds(x=offset, y=cross_pos, width=main_size, height=cross_size)
            )
        else:
            results.append(
                Bounds(x=cross_pos, y=offset, width=cross_size, height=main_size)
            )

        offset += main_size + gap

    return results


__all__ = [
    "clamp",
    "sanitize_bounds",
    "get_layout_direction",
    "apply_padding",
    "distribute",
]
