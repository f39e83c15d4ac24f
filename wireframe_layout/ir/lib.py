"""Core IR models for wireframe component trees.

The component tree is a closed tagged union discriminated on ``type``:
``ScreenNode | ColumnNode | RowNode | CardNode | LeafNode``. Containers own
an ordered list of children; leaves own nothing. Every model is frozen, so a
layout pass can read a tree but never reassign its fields.

Renderer payload (labels, text content, list items, variants) is carried
through as extra fields and is never read by the layout engine.
"""

from typing import Annotated, Iterator, Literal, Union, get_args

from pydantic import BaseModel, Field

from wireframe_layout.schema import Alignment, Direction, Viewport


class Bounds(BaseModel):
    """Rectangle in absolute canvas pixels.

    When used as a size hint on a component, only ``width`` and ``height``
    are read; a value of ``0`` means "no explicit size".
    """

    x: float = Field(default=0, description="Left edge")
    y: float = Field(default=0, description="Top edge")
    width: float = Field(default=0, description="Horizontal extent")
    height: float = Field(default=0, description="Vertical extent")

    model_config = {
        "frozen": True,
    }

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return ``(x, y, width, height)``."""
        return (self.x, self.y, self.width, self.height)


class _NodeBase(BaseModel):
    """Fields shared by every component variant.

    Attributes:
        id: Unique identifier for the node within the tree.
        bounds: Optional size hint; position fields are ignored.
        flex: 0 for fixed size, positive for a proportional weight.
        align: Cross-axis placement inside the parent's content area.
        label: Optional human-readable text.
    """

    id: str = Field(..., description="Unique identifier for the node")
    bounds: Bounds | None = Field(
        default=None,
        description="Size hint; only width and height are read",
    )
    flex: float = Field(
        default=1,
        description="0 = fixed size from bounds, positive = proportional weight",
    )
    align: Alignment = Field(
        default=Alignment.START,
        description="Cross-axis alignment",
    )
    label: str | None = Field(None, description="Human-readable text content")

    model_config = {
        "frozen": True,
        "extra": "allow",
        "use_enum_values": True,
    }

    @property
    def is_container(self) -> bool:
        return False


class ContainerNode(_NodeBase):
    """Base for variants that distribute children along a main axis.

    Attributes:
        gap: Spacing between adjacent children in pixels.
        padding: Inset applied on all four sides before distribution.
        children: Ordered child nodes; order is main-axis placement order.
    """

    gap: float = Field(default=0, description="Spacing between children in pixels")
    padding: float = Field(default=0, description="Internal padding in pixels")
    children: list["ComponentNode"] = Field(
        default_factory=list,
        description="Ordered child nodes",
    )

    @property
    def is_container(self) -> bool:
        return True


class ScreenNode(ContainerNode):
    """A top-level screen. Children stack vertically."""

    type: Literal["screen"] = "screen"
    name: str | None = Field(None, description="Screen title shown above the frame")


class ColumnNode(ContainerNode):
    """A vertical layout container."""

    type: Literal["col"] = "col"


class RowNode(ContainerNode):
    """A horizontal layout container."""

    type: Literal["row"] = "row"


class CardNode(ContainerNode):
    """A bordered vertical container."""

    type: Literal["card"] = "card"
    title: str | None = Field(None, description="Optional card heading")


LeafKind = Literal[
    "appbar",
    "bottomnav",
    "navmenu",
    "text",
    "title",
    "avatar",
    "image",
    "icon",
    "list",
    "divider",
    "button",
    "input",
]

LEAF_KINDS: frozenset[str] = frozenset(get_args(LeafKind))


class LeafNode(_NodeBase):
    """A non-container component. It receives its assigned bounds as-is."""

    type: LeafKind = Field(..., description="Leaf component kind")


ComponentNode = Annotated[
    Union[ScreenNode, ColumnNode, RowNode, CardNode, LeafNode],
    Field(discriminator="type"),
]


class WireframeDocument(BaseModel):
    """Top-level wireframe: a set of screens on one canvas.

    Attributes:
        viewport: Device class fixing each screen's width.
        direction: How screens are tiled (LR side by side, TD stacked).
        screens: Screens in canvas order.
    """

    viewport: Viewport = Field(
        default=Viewport.MOBILE,
        description="Device viewport class",
    )
    direction: Direction = Field(
        default=Direction.LR,
        description="Multi-screen arrangement",
    )
    screens: list[ScreenNode] = Field(
        default_factory=list,
        description="Screens in canvas order",
    )

    model_config = {
        "frozen": True,
        "use_enum_values": True,
    }

    @classmethod
    def from_json(cls, text: str | bytes) -> "WireframeDocument":
        """Parse a document from JSON text.

        Raises:
            pydantic.ValidationError: If the text is not a valid document.
        """
        return cls.model_validate_json(text)


for _model in (ContainerNode, ScreenNode, ColumnNode, RowNode, CardNode):
    _model.model_rebuild()
WireframeDocument.model_rebuild()


def iter_nodes(node: _NodeBase) -> Iterator[_NodeBase]:
    """Yield a node and all its descendants in depth-first pre-order."""
    yield node
    if node.is_container:
        for child in node.children:
            yield from iter_nodes(child)


def export_json_schema() -> dict:
    """Export the WireframeDocument JSON Schema.

    Returns:
        dict: JSON Schema representation of a wireframe document.
    """
    return WireframeDocument.model_json_schema()


__all__ = [
    "Bounds",
    "ComponentNode",
    "ContainerNode",
    "ScreenNode",
    "ColumnNode",
    "RowNode",
    "CardNode",
    "LeafNode",
    "LEAF_KINDS",
    "WireframeDocument",
    "export_json_schema",
    "iter_nodes",
]
