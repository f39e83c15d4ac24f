"""Unit tests for the recursive layout walker."""

import pytest

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

from .errors import InvalidScreenCountError, InvalidTreeError, UnknownKindError
from .flex import apply_padding, get_layout_direction
from .lib import calculate_layout, layout_bounds_by_id, layout_wireframe


def button(node_id: str, width: float = 0, height: float = 0, **kwargs) -> LeafNode:
    """Build a button leaf with an optional size hint."""
    return LeafNode(
        id=node_id,
        type="button",
        label="Test Button",
        bounds=Bounds(width=width, height=height),
        **kwargs,
    )


def text(node_id: str) -> LeafNode:
    return LeafNode(id=node_id, type="text", content="Test Text")


def bounds_of(results) -> list[Bounds]:
    return [r.bounds for r in results]


class TestLeafNodes:
    """Leaves receive their bounds unchanged."""

    @pytest.mark.unit
    def test_leaf_returns_bounds(self):
        bounds = Bounds(x=10, y=20, width=100, height=40)
        node = button("btn-1", 100, 40)
        result = calculate_layout(node, bounds)
        assert len(result) == 1
        assert result[0].node is node
        assert result[0].bounds == bounds

    @pytest.mark.unit
    def test_result_accessors(self):
        [result] = calculate_layout(text("t"), Bounds(width=5, height=5))
        assert result.id == "t"
        assert result.kind == "text"


class TestColumnLayout:
    """Vertical distribution."""

    @pytest.mark.unit
    def test_even_distribution(self):
        col = ColumnNode(id="col", children=[button("a"), button("b"), button("c")])
        result = calculate_layout(col, Bounds(width=200, height=120))
        assert bounds_of(result) == [
            Bounds(x=0, y=0, width=200, height=40),
            Bounds(x=0, y=40, width=200, height=40),
            Bounds(x=0, y=80, width=200, height=40),
        ]

    @pytest.mark.unit
    def test_gap(self):
        col = ColumnNode(id="col", gap=20, children=[button("a"), button("b")])
        result = calculate_layout(col, Bounds(width=200, height=120))
        assert bounds_of(result) == [
            Bounds(x=0, y=0, width=200, height=50),
            Bounds(x=0, y=70, width=200, height=50),
        ]

    @pytest.mark.unit
    def test_padding(self):
        col = ColumnNode(id="col", padding=10, children=[button("a")])
        result = calculate_layout(col, Bounds(width=200, height=100))
        assert result[0].bounds == Bounds(x=10, y=10, width=180, height=80)

    @pytest.mark.unit
    def test_offset_bounds(self):
        col = ColumnNode(id="col", children=[button("a"), button("b")])
        result = calculate_layout(col, Bounds(x=50, y=100, width=200, height=80))
        assert bounds_of(result) == [
            Bounds(x=50, y=100, width=200, height=40),
            Bounds(x=50, y=140, width=200, height=40),
        ]

    @pytest.mark.unit
    def test_fixed_header(self):
        header = button("header", height=60, flex=0)
        col = ColumnNode(id="col", children=[header, button("content")])
        result = calculate_layout(col, Bounds(width=200, height=160))
        assert bounds_of(result) == [
            Bounds(x=0, y=0, width=200, height=60),
            Bounds(x=0, y=60, width=200, height=100),
        ]


class TestRowLayout:
    """Horizontal distribution."""

    @pytest.mark.unit
    def test_even_distribution(self):
        row = RowNode(id="row", children=[button("a"), button("b"), button("c")])
        result = calculate_layout(row, Bounds(width=300, height=50))
        assert [(b.x, b.width, b.height) for b in bounds_of(result)] == [
            (0, 100, 50),
            (100, 100, 50),
            (200, 100, 50),
        ]

    @pytest.mark.unit
    def test_gap(self):
        row = RowNode(id="row", gap=20, children=[button("a"), button("b")])
        result = calculate_layout(row, Bounds(width=200, height=50))
        assert bounds_of(result) == [
            Bounds(x=0, y=0, width=90, height=50),
            Bounds(x=110, y=0, width=90, height=50),
        ]

    @pytest.mark.unit
    def test_padding(self):
        row = RowNode(id="row", padding=15, children=[button("a")])
        result = calculate_layout(row, Bounds(width=200, height=80))
        assert result[0].bounds == Bounds(x=15, y=15, width=170, height=50)

    @pytest.mark.unit
    def test_fixed_and_proportional(self):
        row = RowNode(
            id="row",
            children=[
                button("sidebar", width=100, flex=0),
                button("content1", flex=1),
                button("content2", flex=2),
            ],
        )
        result = calculate_layout(row, Bounds(width=400, height=50))
        assert bounds_of(result) == [
            Bounds(x=0, y=0, width=100, height=50),
            Bounds(x=100, y=0, width=100, height=50),
            Bounds(x=200, y=0, width=200, height=50),
        ]

    @pytest.mark.unit
    def test_multiple_fixed(self):
        row = RowNode(
            id="row",
            children=[
                button("icon", width=32, flex=0),
                button("text"),
                button("action", width=48, flex=0),
            ],
        )
        result = calculate_layout(row, Bounds(width=200, height=50))
        assert [b.width for b in bounds_of(result)] == [32, 120, 48]

    @pytest.mark.unit
    def test_fixed_sidebar_scenario(self):
        row = RowNode(id="row", children=[button("a", width=200, flex=0), button("b")])
        result = calculate_layout(row, Bounds(width=400, height=100))
        assert (result[0].bounds.x, result[0].bounds.width) == (0, 200)
        assert (result[1].bounds.x, result[1].bounds.width) == (200, 200)


class TestOtherContainers:
    """Screens and cards stack vertically."""

    @pytest.mark.unit
    def test_screen(self):
        screen = ScreenNode(id="s", name="Test", children=[text("t"), button("b")])
        result = calculate_layout(screen, Bounds(width=375, height=600))
        assert bounds_of(result) == [
            Bounds(x=0, y=0, width=375, height=300),
            Bounds(x=0, y=300, width=375, height=300),
        ]

    @pytest.mark.unit
    def test_card_gap_and_padding(self):
        card = CardNode(id="card", padding=10, gap=10, children=[button("a"), button("b")])
        result = calculate_layout(card, Bounds(width=200, height=100))
        assert bounds_of(result) == [
            Bounds(x=10, y=10, width=180, height=35),
            Bounds(x=10, y=55, width=180, height=35),
        ]


class TestNesting:
    """Nested containers lay out against their own assigned bounds."""

    @pytest.mark.unit
    def test_col_in_row(self):
        right = ColumnNode(id="right", children=[button("r1"), button("r2")])
        row = RowNode(id="row", children=[button("left"), right])
        result = calculate_layout(row, Bounds(width=400, height=100))
        assert [r.id for r in result] == ["left", "r1", "r2"]
        assert bounds_of(result) == [
            Bounds(x=0, y=0, width=200, height=100),
            Bounds(x=200, y=0, width=200, height=50),
            Bounds(x=200, y=50, width=200, height=50),
        ]

    @pytest.mark.unit
    def test_row_in_col(self):
        bottom = RowNode(id="bottom", children=[button("b1"), button("b2")])
        col = ColumnNode(id="col", children=[button("top"), bottom])
        result = calculate_layout(col, Bounds(width=200, height=200))
        assert bounds_of(result) == [
            Bounds(x=0, y=0, width=200, height=100),
            Bounds(x=0, y=100, width=100, height=100),
            Bounds(x=100, y=100, width=100, height=100),
        ]

    @pytest.mark.unit
    def test_nesting_closure(self, dashboard_screen):
        """Every container's children fill its content extent at every depth."""
        root_bounds = Bounds(x=16, y=48, width=768, height=600)
        placed = {
            r.id: r.bounds
            for r in calculate_layout(dashboard_screen, root_bounds, include_containers=True)
        }

        def check(node):
            if not isinstance(node, ContainerNode) or not node.children:
                return
            content = apply_padding(placed[node.id], node.padding)
            horizontal = get_layout_direction(node.type).value == "horizontal"
            sizes = [
                placed[c.id].width if horizontal else placed[c.id].height
                for c in node.children
            ]
            extent = content.width if horizontal else content.height
            assert sum(sizes) + node.gap * (len(sizes) - 1) == pytest.approx(extent)
            for child in node.children:
                check(child)

        check(dashboard_screen)


class TestEmptyAndContainers:
    """Empty containers and container entries."""

    @pytest.mark.unit
    def test_empty_container_contributes_nothing(self):
        assert calculate_layout(ColumnNode(id="col"), Bounds(width=10, height=10)) == []

    @pytest.mark.unit
    def test_include_containers_preorder(self):
        inner = RowNode(id="inner", children=[button("a")])
        col = ColumnNode(id="col", children=[inner, ColumnNode(id="empty")])
        result = calculate_layout(col, Bounds(width=100, height=100), include_containers=True)
        assert [r.id for r in result] == ["col", "inner", "a", "empty"]
        assert result[0].bounds == Bounds(width=100, height=100)
        assert result[3].bounds == Bounds(x=0, y=50, width=100, height=50)

    @pytest.mark.unit
    def test_every_node_once(self, dashboard_screen):
        result = calculate_layout(
            dashboard_screen, Bounds(width=768, height=600), include_containers=True
        )
        ids = [r.id for r in result]
        assert len(ids) == len(set(ids))


class TestPurity:
    """Layout never mutates its input and is deterministic."""

    @pytest.mark.unit
    def test_input_not_mutated(self, dashboard_screen):
        before = dashboard_screen.model_dump()
        calculate_layout(dashboard_screen, Bounds(width=375, height=600))
        assert dashboard_screen.model_dump() == before

    @pytest.mark.unit
    def test_deterministic(self, dashboard_screen):
        bounds = Bounds(x=1.5, y=2.25, width=777.3, height=611.1)
        first = calculate_layout(dashboard_screen, bounds)
        second = calculate_layout(dashboard_screen, bounds)
        assert [(r.id, r.bounds.as_tuple()) for r in first] == [
            (r.id, r.bounds.as_tuple()) for r in second
        ]

    @pytest.mark.unit
    def test_bounds_by_id(self):
        row = RowNode(id="row", children=[button("a"), button("b")])
        mapping = layout_bounds_by_id(row, Bounds(width=100, height=10))
        assert mapping == {
            "a": Bounds(x=0, y=0, width=50, height=10),
            "b": Bounds(x=50, y=0, width=50, height=10),
        }


class TestInvalidTrees:
    """Precondition violations surface as explicit errors."""

    @pytest.mark.unit
    def test_cycle_raises(self):
        col = ColumnNode(id="loop")
        col.children.append(col)
        with pytest.raises(InvalidTreeError) as exc_info:
            calculate_layout(col, Bounds(width=10, height=10))
        assert exc_info.value.node_id == "loop"

    @pytest.mark.unit
    def test_shared_subtree_is_not_a_cycle(self):
        shared = RowNode(id="shared", children=[button("x")])
        col = ColumnNode(id="col", children=[shared, shared])
        result = calculate_layout(col, Bounds(width=10, height=20))
        assert len(result) == 2

    @pytest.mark.unit
    def test_unknown_node_raises(self):
        with pytest.raises(UnknownKindError):
            calculate_layout(object(), Bounds(width=10, height=10))

    @pytest.mark.unit
    def test_bare_container_base_raises(self):
        """The shared container base is not itself a component kind."""
        bare = ContainerNode(id="bare", children=[button("a")])
        with pytest.raises(UnknownKindError) as exc_info:
            calculate_layout(bare, Bounds(width=10, height=10))
        assert exc_info.value.kind == "ContainerNode"

    @pytest.mark.unit
    def test_bare_container_nested_raises(self):
        bare = ContainerNode(id="bare", children=[button("a")])
        col = ColumnNode(id="col")
        col.children.append(bare)
        with pytest.raises(UnknownKindError):
            calculate_layout(col, Bounds(width=10, height=10))

    @pytest.mark.unit
    def test_negative_root_bounds_clamped(self):
        [result] = calculate_layout(button("a"), Bounds(x=-5, y=-5, width=-1, height=10))
        assert result.bounds == Bounds(x=0, y=0, width=0, height=10)


class TestLayoutWireframe:
    """Whole-document layout."""

    @pytest.mark.unit
    def test_two_screens_side_by_side(self):
        doc = WireframeDocument(
            viewport="mobile",
            direction="LR",
            screens=[
                ScreenNode(id="one", name="One", children=[button("a")]),
                ScreenNode(id="two", name="Two", children=[button("b"), button("c")]),
            ],
        )
        layout = layout_wireframe(doc)
        assert (layout.dimensions.width, layout.dimensions.height) == (846, 664)
        mapping = layout.bounds_by_id()
        assert mapping["a"] == Bounds(x=16, y=48, width=375, height=600)
        assert mapping["b"] == Bounds(x=455, y=48, width=375, height=300)
        assert mapping["c"] == Bounds(x=455, y=348, width=375, height=300)

    @pytest.mark.unit
    def test_include_containers_emits_screen_frames(self, sample_document):
        layout = layout_wireframe(sample_document, include_containers=True)
        by_id = layout.bounds_by_id()
        for frame in layout.frames:
            assert by_id[frame.screen.id] == frame.bounds

    @pytest.mark.unit
    def test_empty_document_raises(self):
        with pytest.raises(InvalidScreenCountError):
            layout_wireframe(WireframeDocument())
