"""Recursive layout of wireframe component trees.

The walker visits a tree depth-first in pre-order. Leaves receive the
bounds their parent assigned; containers shrink their bounds by their
padding, distribute the content area among their children and recurse
into each child with the bounds assigned to it. A call never mutates its
input and keeps no state between calls.
"""

from dataclasses import dataclass, field

from wireframe_layout.core.log import get_logger
from wireframe_layout.ir import (
    Bounds,
    CardNode,
    ColumnNode,
    ContainerNode,
    LeafNode,
    RowNode,
    ScreenNode,
    WireframeDocument,
)

from .errors import InvalidTreeError, UnknownKindError
from .flex import apply_padding, distribute, get_layout_direction, sanitize_bounds
from .viewport import (
    Dimensions,
    ScreenFrame,
    get_screen_frames,
    get_viewport_dimensions,
)

logger = get_logger("layout")


@dataclass(frozen=True)
class LayoutResult:
    """Computed bounds for one node.

    Attributes:
        node: The laid-out node (the caller's own instance).
        bounds: Absolute canvas bounds.
    """

    node: ContainerNode | LeafNode
    bounds: Bounds

    @property
    def id(self) -> str:
        return self.node.id

    @property
    def kind(self) -> str:
        return self.node.type


@dataclass
class WireframeLayout:
    """Layout of a whole multi-screen document.

    Attributes:
        dimensions: Total canvas size.
        frames: Placement of each screen.
        results: Flattened layout entries for every screen, in screen order.
    """

    dimensions: Dimensions
    frames: list[ScreenFrame] = field(default_factory=list)
    results: list[LayoutResult] = field(default_factory=list)

    def bounds_by_id(self) -> dict[str, Bounds]:
        """Map node id to bounds."""
        return {result.id: result.bounds for result in self.results}


def calculate_layout(
    node: ContainerNode | LeafNode,
    bounds: Bounds,
    include_containers: bool = False,
) -> list[LayoutResult]:
    """Lay out a component tree inside the given bounds.

    Args:
        node: Root of the tree.
        bounds: Bounds available to the root.
        include_containers: Also emit an entry for each container, placed
            before its descendants. By default only leaves are emitted and
            a container with no children contributes nothing.

    Returns:
        Layout entries in depth-first order, children in original order.

    Raises:
        InvalidTreeError: If a node is its own ancestor.
        UnknownKindError: If a node is not a known component variant.
    """
    results: list[LayoutResult] = []
    _layout_node(node, sanitize_bounds(bounds), include_containers, results, set())
    return results


def _layout_node(
    node: ContainerNode | LeafNode,
    bounds: Bounds,
    include_containers: bool,
    results: list[LayoutResult],
    ancestors: set[int],
) -> None:
    match node:
        case LeafNode():
            results.append(LayoutResult(node=node, bounds=bounds))

        case ScreenNode() | ColumnNode() | RowNode() | CardNode():
            if id(node) in ancestors:
                raise InvalidTreeError(node.id)

            if include_containers:
                results.append(LayoutResult(node=node, bounds=bounds))
            if not node.children:
                return

            content = apply_padding(bounds, node.padding)
            orientation = get_layout_direction(node.type)
            child_bounds = distribute(content, orientation, node.children, node.gap)

            ancestors.add(id(node))
            for child, assigned in zip(node.children, child_bounds):
                _layout_node(child, assigned, include_containers, results, ancestors)
            ancestors.remove(id(node))

        case _:
            raise UnknownKindError(getattr(node, "type", type(node).__name__))


def layout_bounds_by_id(
    node: ContainerNode | LeafNode,
    bounds: Bounds,
    include_containers: bool = False,
) -> dict[str, Bounds]:
    """Lay out a tree and map node id to computed bounds."""
    return {
        result.id: result.bounds
        for result in calculate_layout(node, bounds, include_containers)
    }


def layout_wireframe(
    document: WireframeDocument,
    include_containers: bool = False,
) -> WireframeLayout:
    """Size the canvas for a document and lay out every screen.

    Args:
        document: The wireframe document.
        include_containers: Forwarded to ``calculate_layout``; screens are
            emitted with their frame bounds when set.

    Returns:
        Canvas dimensions, screen frames and flattened layout entries.

    Raises:
        InvalidScreenCountError: If the document has no screens.
    """
    dimensions = get_viewport_dimensions(
        document.viewport, document.direction, len(document.screens)
    )
    frames = get_screen_frames(document)

    results: list[LayoutResult] = []
    for frame in frames:
        results.extend(calculate_layout(frame.screen, frame.bounds, include_containers))

    logger.debug(
        "Laid out %d screen(s), %d node(s) on a %sx%s canvas",
        len(frames),
        len(results),
        dimensions.width,
        dimensions.height,
    )
    return WireframeLayout(dimensions=dimensions, frames=frames, results=results)


__all__ = [
    "LayoutResult",
    "WireframeLayout",
    "calculate_layout",
    "layout_bounds_by_id",
    "layout_wireframe",
]
