"""Canvas sizing and screen tiling for multi-screen wireframes.

Every screen occupies a box made of the viewport's base width and a shared
base height, surrounded by padding on all sides and topped by a label band.
Boxes are tiled side by side (LR) or stacked (TD) with a fixed gap.
"""

from dataclasses import dataclass

from wireframe_layout.ir import Bounds, ScreenNode, WireframeDocument
from wireframe_layout.schema import Direction, Viewport

from .errors import InvalidScreenCountError

VIEWPORT_WIDTHS: dict[Viewport, int] = {
    Viewport.MOBILE: 375,
    Viewport.TABLET: 768,
    Viewport.DESKTOP: 1200,
}

BASE_HEIGHT = 600
SCREEN_GAP = 32
SCREEN_PADDING = 16
LABEL_SPACE = 32

# Label baseline sits this far below the middle of the label band.
LABEL_BASELINE_OFFSET = 8


@dataclass(frozen=True)
class Dimensions:
    """Width and height of a canvas or screen box."""

    width: float
    height: float


@dataclass(frozen=True)
class ScreenFrame:
    """Placement of one screen on the canvas.

    Attributes:
        screen: The screen node.
        index: Position of the screen in the document.
        bounds: The screen's drawable area (inside padding, below the label).
        label_y: Baseline of the screen's name label.
    """

    screen: ScreenNode
    index: int
    bounds: Bounds
    label_y: float


def get_screen_size(viewport: Viewport | str) -> Dimensions:
    """Size of a screen's drawable area for a viewport class."""
    return Dimensions(width=VIEWPORT_WIDTHS[Viewport(viewport)], height=BASE_HEIGHT)


def get_screen_box(viewport: Viewport | str) -> Dimensions:
    """Size of a screen including its padding and label band."""
    size = get_screen_size(viewport)
    return Dimensions(
        width=size.width + SCREEN_PADDING * 2,
        height=size.height + SCREEN_PADDING * 2 + LABEL_SPACE,
    )


def get_viewport_dimensions(
    viewport: Viewport | str,
    direction: Direction | str,
    screen_count: int,
) -> Dimensions:
    """Calculate total canvas dimensions for a number of screens.

    Args:
        viewport: Viewport class (mobile, tablet, desktop).
        direction: LR for side by side, TD for stacked.
        screen_count: Number of screens; must be at least 1.

    Returns:
        Canvas width and height.

    Raises:
        InvalidScreenCountError: If screen_count is below 1.
        ValueError: If viewport or direction is not a known value.

    Example:
        >>> get_viewport_dimensions("mobile", "LR", 2)
        Dimensions(width=846, height=664)
    """
    if screen_count <= 0:
        raise InvalidScreenCountError(screen_count)

    box = get_screen_box(viewport)
    gaps = SCREEN_GAP * (screen_count - 1)

    if Direction(direction) == Direction.LR:
        return Dimensions(width=box.width * screen_count + gaps, height=box.height)
    return Dimensions(width=box.width, height=box.height * screen_count + gaps)


def get_screen_origin(
    viewport: Viewport | str,
    direction: Direction | str,
    index: int,
) -> tuple[float, float]:
    """Top-left corner of the ``index``-th screen box on the canvas."""
    box = get_screen_box(viewport)
    if Direction(direction) == Direction.LR:
        return (index * (box.width + SCREEN_GAP), 0)
    return (0, index * (box.height + SCREEN_GAP))


def get_screen_frames(document: WireframeDocument) -> list[ScreenFrame]:
    """Place every screen of a document on the canvas.

    Args:
        document: The wireframe document.

    Returns:
        One frame per screen, in document order.
    """
    size = get_screen_size(document.viewport)
    frames: list[ScreenFrame] = []

    for index, screen in enumerate(document.screens):
        x, y = get_screen_origin(document.viewport, document.direction, index)
        bounds = Bounds(
            x=x + SCREEN_PADDING,
            y=y + SCREEN_PADDING + LABEL_SPACE,
            width=size.width,
            height=size.height,
        )
        label_y = y + LABEL_SPACE / 2 + LABEL_BASELINE_OFFSET
        frames.append(
            ScreenFrame(screen=screen, index=index, bounds=bounds, label_y=label_y)
        )

    return frames


__all__ = [
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
