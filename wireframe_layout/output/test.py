"""Tests for output module."""

import json

import pytest

from wireframe_layout.ir import Bounds, LeafNode, RowNode, WireframeDocument
from wireframe_layout.layout import InvalidScreenCountError, calculate_layout
from wireframe_layout.output import (
    LayoutOutput,
    format_layout_json,
    format_layout_tree,
    format_wireframe_tree,
    generate_output,
    layout_to_dict,
    wireframe_layout_to_dict,
)


@pytest.fixture
def sample_row():
    """Create a row with one fixed and one flexible child."""
    return RowNode(
        id="toolbar",
        gap=10,
        children=[
            LeafNode(id="back", type="icon", flex=0, bounds=Bounds(width=40)),
            LeafNode(id="heading", type="title", content="Inbox", label="Inbox"),
        ],
    )


class TestLayoutToDict:
    """Tests for layout_to_dict function."""

    @pytest.mark.unit
    def test_entries(self, sample_row):
        """Entries carry id, type and bounds in layout order."""
        results = calculate_layout(sample_row, Bounds(width=300, height=50))
        assert layout_to_dict(results) == [
            {
                "id": "back",
                "type": "icon",
                "bounds": {"x": 0.0, "y": 0.0, "width": 40.0, "height": 50.0},
            },
            {
                "id": "heading",
                "type": "title",
                "bounds": {"x": 50.0, "y": 0.0, "width": 250.0, "height": 50.0},
            },
        ]

    @pytest.mark.unit
    def test_empty(self):
        """No results give an empty list."""
        assert layout_to_dict([]) == []


class TestWireframeLayoutToDict:
    """Tests for document-level serialization."""

    @pytest.mark.unit
    def test_canvas_and_screens(self, sample_document):
        """Canvas size and screen frames are included."""
        data = generate_output(sample_document).data
        assert (data["width"], data["height"]) == (800, 1360)
        assert [s["id"] for s in data["screens"]] == ["login", "home"]
        assert data["screens"][1] == {
            "id": "home",
            "name": "Home",
            "index": 1,
            "bounds": {"x": 16.0, "y": 744.0, "width": 768.0, "height": 600.0},
            "label_y": 720.0,
        }

    @pytest.mark.unit
    def test_nodes(self, sample_document):
        """Nodes include containers and leaves in pre-order."""
        data = generate_output(sample_document).data
        nodes = {n["id"]: n for n in data["nodes"]}
        assert [n["id"] for n in data["nodes"]][:3] == ["login", "login-form", "login-title"]
        assert nodes["submit"]["bounds"] == {
            "x": 320.0,
            "y": 188.0,
            "width": 160.0,
            "height": 44.0,
        }
        assert nodes["spacer"]["bounds"]["height"] == pytest.approx(376.0)
        assert nodes["feed"]["bounds"] == {
            "x": 16.0,
            "y": 800.0,
            "width": 768.0,
            "height": 544.0,
        }

    @pytest.mark.unit
    def test_serializable(self, sample_document):
        """Output survives a JSON round trip unchanged."""
        data = generate_output(sample_document).data
        assert json.loads(json.dumps(data)) == data


class TestFormatLayoutJson:
    """Tests for format_layout_json function."""

    @pytest.mark.unit
    def test_default_indent(self, monkeypatch):
        """Default indentation comes from configuration."""
        monkeypatch.delenv("WIREFRAME_JSON_INDENT", raising=False)
        text = format_layout_json({"a": 1})
        assert text == '{\n  "a": 1\n}'

    @pytest.mark.unit
    def test_compact(self):
        """Zero indent produces single-line JSON."""
        assert format_layout_json({"a": [1, 2]}, indent=0) == '{"a": [1, 2]}'

    @pytest.mark.unit
    def test_indent_from_environment(self, monkeypatch):
        """WIREFRAME_JSON_INDENT controls indentation."""
        monkeypatch.setenv("WIREFRAME_JSON_INDENT", "4")
        assert format_layout_json({"a": 1}) == '{\n    "a": 1\n}'


class TestFormatLayoutTree:
    """Tests for format_layout_tree function."""

    @pytest.mark.unit
    def test_single_node(self):
        """Test formatting single node."""
        node = LeafNode(id="cta", type="button", label="Buy")
        assert format_layout_tree(node) == "Buy [button]"

    @pytest.mark.unit
    def test_nested_tree(self, dashboard_screen):
        """Test formatting nested tree."""
        result = format_layout_tree(dashboard_screen)
        lines = result.splitlines()
        assert lines[0] == "Dashboard [screen]"
        assert lines[1] == "├── appbar [appbar, flex 0]"
        assert lines[2] == "├── body [row, horizontal]"
        assert lines[3] == "│   ├── sidebar [navmenu, flex 0]"
        assert lines[-1] == "└── tabs [bottomnav, flex 0]"
        assert "Stats [card, flex 2]" in result

    @pytest.mark.unit
    def test_with_placements(self, sample_row):
        """Computed bounds are appended when available."""
        results = calculate_layout(sample_row, Bounds(width=300, height=50), True)
        placements = {id(r.node): r.bounds for r in results}
        lines = format_layout_tree(sample_row, placements).splitlines()
        assert lines == [
            "toolbar [row, horizontal] (0, 0) 300x50",
            "├── back [icon, flex 0] (0, 0) 40x50",
            "└── Inbox [title] (50, 0) 250x50",
        ]

    @pytest.mark.unit
    def test_fractional_bounds_rounded(self):
        """Bounds print with at most two decimals."""
        icons = [LeafNode(id=f"c{i}", type="icon") for i in range(3)]
        row = RowNode(id="r", children=icons)
        results = calculate_layout(row, Bounds(width=100, height=10), True)
        placements = {id(r.node): r.bounds for r in results}
        lines = format_layout_tree(row, placements).splitlines()
        assert lines[2] == "├── c1 [icon] (33.33, 0) 33.33x10"


class TestGenerateOutput:
    """Tests for generate_output function."""

    @pytest.mark.unit
    def test_generate(self, sample_document):
        """Both output forms are produced."""
        output = generate_output(sample_document)
        assert isinstance(output, LayoutOutput)
        expected_head = "Canvas 800x1360\n\nLogin [screen] (16, 48) 768x600"
        assert output.text_tree.startswith(expected_head)
        assert "\n\nHome [screen] (16, 744) 768x600" in output.text_tree
        assert json.loads(output.to_json()) == output.data

    @pytest.mark.unit
    def test_tree_matches_layout(self, sample_document):
        """format_wireframe_tree renders the same layout."""
        output = generate_output(sample_document)
        assert format_wireframe_tree(output.layout) == output.text_tree

    @pytest.mark.unit
    def test_wireframe_layout_to_dict(self, sample_document):
        """generate_output data matches wireframe_layout_to_dict."""
        output = generate_output(sample_document)
        assert wireframe_layout_to_dict(output.layout) == output.data

    @pytest.mark.unit
    def test_no_screens(self):
        """Documents without screens cannot be laid out."""
        with pytest.raises(InvalidScreenCountError):
            generate_output(WireframeDocument())
