"""Authoritative Schema Module for wireframe component definitions.

This module is the single source of truth for the closed vocabularies of
the wireframe system:
- Component kinds and their categories
- Layout enums (orientation, cross-axis alignment)
- Canvas enums (viewport class, multi-screen arrangement)
- Per-kind metadata used by validation (container flag, required fields)

All kind-related queries should route through this module.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ComponentCategory(str, Enum):
    """High-level component groupings."""

    CONTAINER = "container"
    NAVIGATION = "navigation"
    CONTENT = "content"
    CONTROL = "control"


class Orientation(str, Enum):
    """Main-axis direction of a container.

    - VERTICAL: Children are placed top-to-bottom
    - HORIZONTAL: Children are placed left-to-right
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Alignment(str, Enum):
    """Cross-axis placement of a child inside its container's content area."""

    START = "start"
    CENTER = "center"
    END = "end"


class Viewport(str, Enum):
    """Device class that fixes the base width of every screen."""

    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


class Direction(str, Enum):
    """Arrangement of multiple screens on the canvas.

    - LR: Screens side by side, left to right
    - TD: Screens stacked, top to bottom
    """

    LR = "LR"
    TD = "TD"


class ComponentKind(str, Enum):
    """Wireframe component vocabulary.

    Categories:
        Containers: screen, col, row, card
        Navigation: appbar, bottomnav, navmenu
        Content: text, title, avatar, image, icon, list, divider
        Controls: button, input
    """

    # Containers
    SCREEN = "screen"
    COLUMN = "col"
    ROW = "row"
    CARD = "card"

    # Navigation
    APPBAR = "appbar"
    BOTTOMNAV = "bottomnav"
    NAVMENU = "navmenu"

    # Content
    TEXT = "text"
    TITLE = "title"
    AVATAR = "avatar"
    IMAGE = "image"
    ICON = "icon"
    LIST = "list"
    DIVIDER = "divider"

    # Controls
    BUTTON = "button"
    INPUT = "input"


@dataclass(frozen=True)
class FieldRequirement:
    """A renderer payload field a component kind must carry.

    Attributes:
        name: Field name in the serialized component.
        value_type: Expected Python type after JSON decoding.
        allow_empty: Whether an empty string or list is acceptable.
    """

    name: str
    value_type: type
    allow_empty: bool = True


@dataclass(frozen=True)
class ComponentMeta:
    """Metadata definition for a wireframe component kind."""

    kind: ComponentKind
    category: ComponentCategory
    description: str
    aliases: tuple[str, ...] = field(default_factory=tuple)
    required_fields: tuple[FieldRequirement, ...] = field(default_factory=tuple)

    @property
    def is_container(self) -> bool:
        """Whether this kind owns an ordered list of children."""
        return self.category == ComponentCategory.CONTAINER

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to dictionary for schema export."""
        return {
            "kind": self.kind.value,
            "category": self.category.value,
            "description": self.description,
            "aliases": list(self.aliases),
            "is_container": self.is_container,
            "required_fields": [req.name for req in self.required_fields],
        }


_NAME = FieldRequirement("name", str, allow_empty=False)
_LABEL = FieldRequirement("label", str, allow_empty=False)
_CONTENT = FieldRequirement("content", str)
_ITEMS = FieldRequirement("items", list)


COMPONENT_REGISTRY: dict[ComponentKind, ComponentMeta] = {
    # === CONTAINERS ===
    ComponentKind.SCREEN: ComponentMeta(
        kind=ComponentKind.SCREEN,
        category=ComponentCategory.CONTAINER,
        description="Top-level page; stacks its children vertically",
        aliases=("page", "view"),
        required_fields=(_NAME,),
    ),
    ComponentKind.COLUMN: ComponentMeta(
        kind=ComponentKind.COLUMN,
        category=ComponentCategory.CONTAINER,
        description="Vertical layout container",
        aliases=("column", "stack", "vstack"),
    ),
    ComponentKind.ROW: ComponentMeta(
        kind=ComponentKind.ROW,
        category=ComponentCategory.CONTAINER,
        description="Horizontal layout container",
        aliases=("hstack", "inline"),
    ),
    ComponentKind.CARD: ComponentMeta(
        kind=ComponentKind.CARD,
        category=ComponentCategory.CONTAINER,
        description="Bordered vertical container with an optional title",
        aliases=("panel", "tile"),
    ),
    # === NAVIGATION ===
    ComponentKind.APPBAR: ComponentMeta(
        kind=ComponentKind.APPBAR,
        category=ComponentCategory.NAVIGATION,
        description="Top app bar with title and icons",
        aliases=("toolbar", "header", "topbar"),
    ),
    ComponentKind.BOTTOMNAV: ComponentMeta(
        kind=ComponentKind.BOTTOMNAV,
        category=ComponentCategory.NAVIGATION,
        description="Bottom navigation bar with items",
        aliases=("bottom_nav", "tabbar"),
        required_fields=(_ITEMS,),
    ),
    ComponentKind.NAVMENU: ComponentMeta(
        kind=ComponentKind.NAVMENU,
        category=ComponentCategory.NAVIGATION,
        description="Side or inline navigation menu",
        aliases=("menu", "sidebar", "nav"),
        required_fields=(_ITEMS,),
    ),
    # === CONTENT ===
    ComponentKind.TEXT: ComponentMeta(
        kind=ComponentKind.TEXT,
        category=ComponentCategory.CONTENT,
        description="Static body text",
        aliases=("label", "paragraph"),
        required_fields=(_CONTENT,),
    ),
    ComponentKind.TITLE: ComponentMeta(
        kind=ComponentKind.TITLE,
        category=ComponentCategory.CONTENT,
        description="Heading text",
        aliases=("heading", "h1"),
        required_fields=(_CONTENT,),
    ),
    ComponentKind.AVATAR: ComponentMeta(
        kind=ComponentKind.AVATAR,
        category=ComponentCategory.CONTENT,
        description="Circular avatar placeholder",
        aliases=("profile_picture",),
    ),
    ComponentKind.IMAGE: ComponentMeta(
        kind=ComponentKind.IMAGE,
        category=ComponentCategory.CONTENT,
        description="Image placeholder",
        aliases=("img", "picture", "photo"),
    ),
    ComponentKind.ICON: ComponentMeta(
        kind=ComponentKind.ICON,
        category=ComponentCategory.CONTENT,
        description="Small icon placeholder",
        aliases=("glyph",),
    ),
    ComponentKind.LIST: ComponentMeta(
        kind=ComponentKind.LIST,
        category=ComponentCategory.CONTENT,
        description="List of labelled items",
        aliases=("listview", "ul"),
        required_fields=(_ITEMS,),
    ),
    ComponentKind.DIVIDER: ComponentMeta(
        kind=ComponentKind.DIVIDER,
        category=ComponentCategory.CONTENT,
        description="Horizontal or vertical separator line",
        aliases=("separator", "hr"),
    ),
    # === CONTROLS ===
    ComponentKind.BUTTON: ComponentMeta(
        kind=ComponentKind.BUTTON,
        category=ComponentCategory.CONTROL,
        description="Clickable button",
        aliases=("btn",),
        required_fields=(_LABEL,),
    ),
    ComponentKind.INPUT: ComponentMeta(
        kind=ComponentKind.INPUT,
        category=ComponentCategory.CONTROL,
        description="Text input field",
        aliases=("textfield", "textbox", "field"),
    ),
}

CONTAINER_KINDS: frozenset[ComponentKind] = frozenset(
    meta.kind for meta in COMPONENT_REGISTRY.values() if meta.is_container
)


def get_component_meta(kind: ComponentKind | str) -> ComponentMeta:
    """Get metadata for a component kind.

    Args:
        kind: The component kind (enum member or raw value).

    Returns:
        ComponentMeta for the kind.

    Raises:
        KeyError: If the kind is not in the registry.
    """
    try:
        return COMPONENT_REGISTRY[ComponentKind(kind)]
    except ValueError:
        raise KeyError(kind) from None


def get_component_category(kind: ComponentKind | str) -> ComponentCategory:
    """Get the category for a component kind."""
    return get_component_meta(kind).category


def get_components_by_category(category: ComponentCategory) -> list[ComponentKind]:
    """Get all component kinds in a category.

    Args:
        category: The category to filter by.

    Returns:
        List of ComponentKind values in the category.
    """
    return [
        meta.kind for meta in COMPONENT_REGISTRY.values() if meta.category == category
    ]


def is_container_kind(kind: ComponentKind | str) -> bool:
    """Check whether a kind owns children. Unknown kinds are not containers."""
    try:
        return ComponentKind(kind) in CONTAINER_KINDS
    except ValueError:
        return False


def resolve_alias(alias: str) -> ComponentKind | None:
    """Resolve a component alias to its canonical kind.

    Args:
        alias: The alias string to resolve (case-insensitive).

    Returns:
        The canonical ComponentKind, or None if not found.
    """
    alias_lower = alias.lower().strip()

    for kind in ComponentKind:
        if kind.value == alias_lower:
            return kind

    for meta in COMPONENT_REGISTRY.values():
        if alias_lower in meta.aliases:
            return meta.kind

    return None


__all__ = [
    # Enums
    "ComponentCategory",
    "ComponentKind",
    "Orientation",
    "Alignment",
    "Viewport",
    "Direction",
    # Metadata
    "FieldRequirement",
    "ComponentMeta",
    "COMPONENT_REGISTRY",
    "CONTAINER_KINDS",
    # Lookup functions
    "get_component_meta",
    "get_component_category",
    "get_components_by_category",
    "is_container_kind",
    "resolve_alias",
]
