"""Unit tests for the flex distribution engine and direction resolver."""

import math

import pytest

from wireframe_layout.ir import Bounds, LeafNode
from wireframe_layout.schema import Orientation

from .errors import UnknownKindError
from .flex import apply_padding, clamp, distribute, get_layout_direction


def leaf(node_id: str, width: float = 0, height: float = 0, **kwargs) -> LeafNode:
    """Build a button leaf with an optional size hint."""
    return LeafNode(
        id=node_id,
        type="button",
        label=node_id,
        bounds=Bounds(width=width, height=height),
        **kwargs,
    )


class TestGetLayoutDirection:
    """Tests for main-axis resolution."""

    @pytest.mark.unit
    def test_row_is_horizontal(self):
        assert get_layout_direction("row") is Orientation.HORIZONTAL

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", ["col", "screen", "card"])
    def test_other_containers_are_vertical(self, kind):
        assert get_layout_direction(kind) is Orientation.VERTICAL

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", ["button", "text"])
    def test_leaves_default_to_vertical(self, kind):
        assert get_layout_direction(kind) is Orientation.VERTICAL

    @pytest.mark.unit
    def test_unknown_kind_raises(self):
        with pytest.raises(UnknownKindError) as exc_info:
            get_layout_direction("grid")
        assert exc_info.value.kind == "grid"


class TestClamp:
    """Tests for numeric clamping."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value", [None, -1, -0.5, math.nan, math.inf, -math.inf]
    )
    def test_invalid_values_clamp_to_zero(self, value):
        assert clamp(value) == 0.0

    @pytest.mark.unit
    def test_valid_values_pass_through(self):
        assert clamp(12) == 12.0
        assert clamp(0) == 0.0


class TestApplyPadding:
    """Tests for padding application."""

    @pytest.mark.unit
    def test_insets_all_sides(self):
        padded = apply_padding(Bounds(x=10, y=20, width=200, height=100), 10)
        assert padded == Bounds(x=20, y=30, width=180, height=80)

    @pytest.mark.unit
    def test_oversized_padding_clamps_extent(self):
        padded = apply_padding(Bounds(width=30, height=10), 20)
        assert padded.width == 0
        assert padded.height == 0

    @pytest.mark.unit
    def test_negative_padding_ignored(self):
        b = Bounds(x=5, y=5, width=50, height=50)
        assert apply_padding(b, -10) == b


class TestDistribute:
    """Tests for the two-pass distribution."""

    @pytest.mark.unit
    def test_no_children(self):
        assert distribute(Bounds(width=100, height=100), "vertical", []) == []

    @pytest.mark.unit
    def test_equal_flex_vertical(self):
        """Three flex children in a 120px column get 40px each."""
        children = [leaf("a"), leaf("b"), leaf("c")]
        result = distribute(Bounds(width=200, height=120), "vertical", children)
        assert [b.y for b in result] == [0, 40, 80]
        assert [b.height for b in result] == [40, 40, 40]
        assert all(b.width == 200 for b in result)

    @pytest.mark.unit
    def test_gap_subtraction(self):
        """Two children with a 20px gap in 120px: 50 each, second at 70."""
        result = distribute(
            Bounds(width=200, height=120), "vertical", [leaf("a"), leaf("b")], gap=20
        )
        assert result[0] == Bounds(x=0, y=0, width=200, height=50)
        assert result[1] == Bounds(x=0, y=70, width=200, height=50)

    @pytest.mark.unit
    def test_fixed_size_exemption(self):
        """A flex=0 child keeps its size no matter the sibling weights."""
        children = [
            leaf("fixed", width=120, flex=0),
            leaf("a", flex=3),
            leaf("b", flex=5),
        ]
        result = distribute(Bounds(width=520, height=40), "horizontal", children)
        assert result[0].width == 120
        assert result[1].width == pytest.approx(150)
        assert result[2].width == pytest.approx(250)

    @pytest.mark.unit
    def test_proportional_weights(self):
        children = [leaf("a", flex=1), leaf("b", flex=2)]
        result = distribute(Bounds(width=400, height=40), "horizontal", children)
        assert result[0].width == pytest.approx(400 / 3)
        assert result[1].width == pytest.approx(800 / 3)
        assert result[1].x == pytest.approx(400 / 3)

    @pytest.mark.unit
    def test_row_scenario(self):
        """Row of 400 with a fixed 200 child and a flex child."""
        children = [leaf("a", width=200, flex=0), leaf("b")]
        result = distribute(Bounds(width=400, height=50), "horizontal", children)
        assert (result[0].x, result[0].width) == (0, 200)
        assert (result[1].x, result[1].width) == (200, 200)

    @pytest.mark.unit
    def test_all_fixed_without_size_get_zero(self):
        """With no flexible sibling the fallback size is zero."""
        children = [leaf("a", flex=0), leaf("b", flex=0)]
        result = distribute(Bounds(width=200, height=50), "horizontal", children)
        assert [b.width for b in result] == [0, 0]
        assert [b.x for b in result] == [0, 0]

    @pytest.mark.unit
    def test_fixed_without_size_uses_flex_unit(self):
        """A sizeless flex=0 child falls back to one flex unit."""
        children = [leaf("a", flex=0), leaf("b", flex=2)]
        result = distribute(Bounds(width=300, height=50), "horizontal", children)
        assert result[0].width == 150
        assert result[1].width == 300

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "align,expected_y",
        [("start", 0), ("center", 30), ("end", 60)],
    )
    def test_cross_alignment_horizontal(self, align, expected_y):
        child = leaf("btn", height=40, align=align)
        [result] = distribute(Bounds(width=300, height=100), "horizontal", [child])
        assert result == Bounds(x=0, y=expected_y, width=300, height=40)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "align,expected_x",
        [("start", 0), ("center", 60), ("end", 120)],
    )
    def test_cross_alignment_vertical(self, align, expected_x):
        child = leaf("btn", width=80, align=align)
        [result] = distribute(Bounds(width=200, height=100), "vertical", [child])
        assert result == Bounds(x=expected_x, y=0, width=80, height=100)

    @pytest.mark.unit
    def test_cross_size_defaults_to_content(self):
        [result] = distribute(Bounds(x=5, y=5, width=90, height=30), "horizontal", [leaf("a")])
        assert result.height == 30
        assert result.y == 5

    @pytest.mark.unit
    def test_oversized_cross_not_clipped(self):
        """A child asking for more cross space than available keeps its size."""
        child = leaf("tall", height=150, align="center")
        [result] = distribute(Bounds(width=100, height=100), "horizontal", [child])
        assert result.height == 150
        # Centered overhang would start at -25; the canvas edge stops it.
        assert result.y == 0

    @pytest.mark.unit
    def test_oversized_center_overhangs_both_sides(self):
        child = leaf("tall", height=150, align="center")
        content = Bounds(x=0, y=100, width=100, height=100)
        [result] = distribute(content, "horizontal", [child])
        assert result == Bounds(x=0, y=75, width=100, height=150)

    @pytest.mark.unit
    def test_oversized_end_overhangs_start(self):
        child = leaf("wide", width=150, align="end")
        content = Bounds(x=200, y=0, width=100, height=100)
        [result] = distribute(content, "vertical", [child])
        assert result == Bounds(x=150, y=0, width=150, height=100)

    @pytest.mark.unit
    def test_oversized_start_stays_at_origin(self):
        child = leaf("wide", width=150, align="start")
        content = Bounds(x=200, y=0, width=100, height=100)
        [result] = distribute(content, "vertical", [child])
        assert result.x == 200

    @pytest.mark.unit
    def test_sum_matches_extent(self):
        """Main sizes plus gaps fill the content extent."""
        children = [leaf("a", height=25, flex=0), leaf("b", flex=1.5), leaf("c", flex=0.7)]
        result = distribute(Bounds(width=50, height=333), "vertical", children, gap=7)
        total = sum(b.height for b in result) + 7 * (len(children) - 1)
        assert total == pytest.approx(333)
        assert result[-1].bottom == pytest.approx(333)

    @pytest.mark.unit
    def test_negative_inputs_clamped(self):
        """Negative sizes, weights and gaps never produce negative bounds."""
        children = [
            leaf("a", width=-50, height=-10, flex=0),
            leaf("b", flex=-3),
            leaf("c"),
        ]
        result = distribute(Bounds(width=100, height=20), "horizontal", children, gap=-5)
        for bounds in result:
            assert bounds.width >= 0
            assert bounds.height >= 0
            assert bounds.x >= 0
        assert result[2].width == 100

    @pytest.mark.unit
    def test_gaps_larger_than_extent(self):
        result = distribute(
            Bounds(width=10, height=10), "horizontal", [leaf("a"), leaf("b")], gap=50
        )
        assert [b.width for b in result] == [0, 0]
        assert result[1].x == 50

    @pytest.mark.unit
    def test_input_not_mutated(self):
        children = [leaf("a", width=10, flex=0), leaf("b")]
        before = [c.model_dump() for c in children]
        distribute(Bounds(width=100, height=10), "horizontal", children, gap=4)
        assert [c.model_dump() for c in children] == before

    @pytest.mark.unit
    def test_deterministic(self):
        children = [leaf("a", flex=1), leaf("b", flex=3), leaf("c", width=17, flex=0)]
        content = Bounds(x=3.3, y=1.1, width=777.7, height=41)
        first = distribute(content, "horizontal", children, gap=3)
        second = distribute(content, "horizontal", children, gap=3)
        assert [b.as_tuple() for b in first] == [b.as_tuple() for b in second]
