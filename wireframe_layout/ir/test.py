"""Unit tests for the IR models."""

import json

import pytest
from pydantic import ValidationError

from wireframe_layout.ir import (
    LEAF_KINDS,
    Bounds,
    CardNode,
    ColumnNode,
    LeafNode,
    RowNode,
    ScreenNode,
    WireframeDocument,
    export_json_schema,
    iter_nodes,
)
from wireframe_layout.schema import CONTAINER_KINDS, ComponentKind


class TestBounds:
    """Tests for the Bounds rectangle."""

    @pytest.mark.unit
    def test_defaults(self):
        assert Bounds().as_tuple() == (0, 0, 0, 0)

    @pytest.mark.unit
    def test_edges(self):
        b = Bounds(x=10, y=20, width=30, height=40)
        assert b.right == 40
        assert b.bottom == 60

    @pytest.mark.unit
    def test_frozen(self):
        b = Bounds(width=10)
        with pytest.raises(ValidationError):
            b.width = 20

    @pytest.mark.unit
    def test_negative_values_accepted(self):
        """Sizes are clamped by the engine, not rejected by the model."""
        b = Bounds(width=-5, height=-1)
        assert b.width == -5


class TestComponentNodes:
    """Tests for the tagged component variants."""

    @pytest.mark.unit
    def test_minimal_leaf(self):
        node = LeafNode(id="btn", type="button")
        assert node.flex == 1
        assert node.align == "start"
        assert node.bounds is None
        assert not node.is_container

    @pytest.mark.unit
    def test_container_defaults(self):
        col = ColumnNode(id="col")
        assert col.type == "col"
        assert col.gap == 0
        assert col.padding == 0
        assert col.children == []
        assert col.is_container

    @pytest.mark.unit
    def test_variant_tags(self):
        assert ScreenNode(id="s").type == "screen"
        assert RowNode(id="r").type == "row"
        assert CardNode(id="c").type == "card"

    @pytest.mark.unit
    def test_leaf_rejects_container_kind(self):
        with pytest.raises(ValidationError):
            LeafNode(id="x", type="row")

    @pytest.mark.unit
    def test_leaf_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            LeafNode(id="x", type="carousel")

    @pytest.mark.unit
    def test_leaf_kinds_cover_schema(self):
        """Every non-container schema kind is a valid leaf kind."""
        expected = {k.value for k in ComponentKind} - {k.value for k in CONTAINER_KINDS}
        assert LEAF_KINDS == expected

    @pytest.mark.unit
    def test_children_dispatch_on_type(self):
        """Dict children are parsed into the matching variant."""
        row = RowNode.model_validate(
            {
                "id": "row",
                "children": [
                    {"id": "a", "type": "button", "label": "OK"},
                    {"id": "b", "type": "col", "children": []},
                    {"id": "c", "type": "card", "title": "Info"},
                ],
            }
        )
        assert isinstance(row.children[0], LeafNode)
        assert isinstance(row.children[1], ColumnNode)
        assert isinstance(row.children[2], CardNode)
        assert row.children[2].title == "Info"

    @pytest.mark.unit
    def test_child_instances_kept(self):
        """Model instances passed as children are not copied."""
        leaf = LeafNode(id="a", type="text", content="hi")
        col = ColumnNode(id="col", children=[leaf])
        assert col.children[0] is leaf

    @pytest.mark.unit
    def test_renderer_payload_carried(self):
        leaf = LeafNode.model_validate(
            {"id": "nav", "type": "bottomnav", "items": [{"label": "Home"}]}
        )
        assert leaf.items == [{"label": "Home"}]
        assert leaf.model_dump()["items"] == [{"label": "Home"}]

    @pytest.mark.unit
    def test_frozen_node(self):
        col = ColumnNode(id="col")
        with pytest.raises(ValidationError):
            col.gap = 10

    @pytest.mark.unit
    def test_invalid_align_rejected(self):
        with pytest.raises(ValidationError):
            LeafNode(id="x", type="icon", align="stretch")


class TestWireframeDocument:
    """Tests for the top-level document."""

    @pytest.mark.unit
    def test_defaults(self):
        doc = WireframeDocument()
        assert doc.viewport == "mobile"
        assert doc.direction == "LR"
        assert doc.screens == []

    @pytest.mark.unit
    def test_from_json(self, sample_document_dict):
        doc = WireframeDocument.from_json(json.dumps(sample_document_dict))
        assert doc.viewport == "tablet"
        assert doc.direction == "TD"
        assert [s.id for s in doc.screens] == ["login", "home"]
        assert doc.screens[0].name == "Login"

    @pytest.mark.unit
    def test_from_json_rejects_bad_viewport(self):
        with pytest.raises(ValidationError):
            WireframeDocument.from_json('{"viewport": "watch", "screens": []}')

    @pytest.mark.unit
    def test_json_schema_export(self):
        schema = export_json_schema()
        assert schema["title"] == "WireframeDocument"
        assert "screens" in schema["properties"]


class TestIterNodes:
    """Tests for tree iteration."""

    @pytest.mark.unit
    def test_preorder(self):
        tree = ColumnNode(
            id="root",
            children=[
                LeafNode(id="a", type="text"),
                RowNode(
                    id="row",
                    children=[
                        LeafNode(id="b", type="button"),
                        LeafNode(id="c", type="button"),
                    ],
                ),
                LeafNode(id="d", type="divider"),
            ],
        )
        assert [n.id for n in iter_nodes(tree)] == ["root", "a", "row", "b", "c", "d"]
