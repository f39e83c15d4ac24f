"""Unit tests for canvas sizing and screen tiling."""

import pytest

from wireframe_layout.ir import Bounds, ScreenNode, WireframeDocument

from .errors import InvalidScreenCountError
from .viewport import (
    BASE_HEIGHT,
    LABEL_SPACE,
    SCREEN_GAP,
    SCREEN_PADDING,
    Dimensions,
    get_screen_box,
    get_screen_frames,
    get_screen_origin,
    get_viewport_dimensions,
)

BOX_HEIGHT = BASE_HEIGHT + SCREEN_PADDING * 2 + LABEL_SPACE


class TestConstants:
    """The tiling constants are part of the rendering contract."""

    @pytest.mark.unit
    def test_values(self):
        assert (BASE_HEIGHT, SCREEN_GAP, SCREEN_PADDING, LABEL_SPACE) == (600, 32, 16, 32)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "viewport,width", [("mobile", 375), ("tablet", 768), ("desktop", 1200)]
    )
    def test_screen_box(self, viewport, width):
        assert get_screen_box(viewport) == Dimensions(width=width + 32, height=664)


class TestGetViewportDimensions:
    """Tests for canvas size calculation."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "viewport,width", [("mobile", 375), ("tablet", 768), ("desktop", 1200)]
    )
    def test_single_screen(self, viewport, width):
        dims = get_viewport_dimensions(viewport, "LR", 1)
        assert dims.width == width + 16 * 2
        assert dims.height == 600 + 16 * 2 + 32

    @pytest.mark.unit
    def test_side_by_side(self):
        dims = get_viewport_dimensions("mobile", "LR", 3)
        assert dims.width == (375 + 32) * 3 + 32 * 2
        assert dims.height == BOX_HEIGHT

    @pytest.mark.unit
    def test_stacked(self):
        dims = get_viewport_dimensions("mobile", "TD", 2)
        assert dims.width == 375 + 32
        assert dims.height == BOX_HEIGHT * 2 + 32

    @pytest.mark.unit
    def test_stacked_swaps_roles(self):
        lr = get_viewport_dimensions("tablet", "LR", 4)
        td = get_viewport_dimensions("tablet", "TD", 4)
        box = get_screen_box("tablet")
        assert lr.width == box.width * 4 + SCREEN_GAP * 3
        assert td.height == box.height * 4 + SCREEN_GAP * 3

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [0, -1])
    def test_invalid_screen_count(self, count):
        with pytest.raises(InvalidScreenCountError) as exc_info:
            get_viewport_dimensions("mobile", "LR", count)
        assert exc_info.value.screen_count == count

    @pytest.mark.unit
    def test_unknown_viewport(self):
        with pytest.raises(ValueError):
            get_viewport_dimensions("watch", "LR", 1)


class TestScreenFrames:
    """Tests for screen placement."""

    @pytest.mark.unit
    def test_origins_lr(self):
        assert get_screen_origin("mobile", "LR", 0) == (0, 0)
        assert get_screen_origin("mobile", "LR", 2) == (2 * (407 + 32), 0)

    @pytest.mark.unit
    def test_origins_td(self):
        assert get_screen_origin("desktop", "TD", 1) == (0, 664 + 32)

    @pytest.mark.unit
    def test_frames_lr(self):
        doc = WireframeDocument(
            viewport="mobile",
            direction="LR",
            screens=[ScreenNode(id="a", name="A"), ScreenNode(id="b", name="B")],
        )
        frames = get_screen_frames(doc)
        assert [f.index for f in frames] == [0, 1]
        assert frames[0].bounds == Bounds(x=16, y=48, width=375, height=600)
        assert frames[1].bounds == Bounds(x=407 + 32 + 16, y=48, width=375, height=600)
        assert frames[0].label_y == 32 / 2 + 8
        assert frames[1].screen.id == "b"

    @pytest.mark.unit
    def test_frames_td(self):
        doc = WireframeDocument(
            viewport="tablet",
            direction="TD",
            screens=[ScreenNode(id="a"), ScreenNode(id="b")],
        )
        second = get_screen_frames(doc)[1]
        y = 664 + 32
        assert second.bounds == Bounds(x=16, y=y + 48, width=768, height=600)
        assert second.label_y == y + 24

    @pytest.mark.unit
    def test_frames_fit_canvas(self):
        doc = WireframeDocument(
            viewport="desktop",
            direction="LR",
            screens=[ScreenNode(id=f"s{i}") for i in range(3)],
        )
        dims = get_viewport_dimensions(doc.viewport, doc.direction, 3)
        last = get_screen_frames(doc)[-1]
        assert last.bounds.right + SCREEN_PADDING == dims.width
        assert last.bounds.bottom + SCREEN_PADDING == dims.height

    @pytest.mark.unit
    def test_no_screens(self):
        assert get_screen_frames(WireframeDocument()) == []
