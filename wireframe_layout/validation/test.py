"""Unit tests for validation module."""

import json

import pytest

from wireframe_layout.ir import Bounds, ColumnNode, LeafNode, RowNode
from wireframe_layout.layout import InvalidTreeError
from wireframe_layout.validation import (
    ValidationError,
    check_layout_fill,
    is_valid,
    validate_document,
    validate_tree,
)


def _paths(errors: list[ValidationError]) -> list[str]:
    return [e.path for e in errors]


class TestValidateDocumentRoot:
    """Tests for root-level document checks."""

    @pytest.mark.unit
    def test_valid_document(self, sample_document_dict):
        """Well-formed document passes validation."""
        assert validate_document(sample_document_dict) == []

    @pytest.mark.unit
    def test_accepts_json_text(self, sample_document_dict):
        """JSON text is decoded before validation."""
        assert validate_document(json.dumps(sample_document_dict)) == []

    @pytest.mark.unit
    def test_invalid_json(self):
        """Unparseable text yields a single invalid_json error."""
        errors = validate_document("{not json")
        assert len(errors) == 1
        assert errors[0].error_type == "invalid_json"
        assert errors[0].message.startswith("Invalid JSON:")

    @pytest.mark.unit
    def test_root_must_be_object(self):
        """A JSON array is not a wireframe."""
        errors = validate_document("[]")
        assert len(errors) == 1
        assert errors[0].error_type == "invalid_type"

    @pytest.mark.unit
    def test_missing_viewport(self, sample_document_dict):
        """Missing viewport is reported at its path."""
        del sample_document_dict["viewport"]
        errors = validate_document(sample_document_dict)
        assert _paths(errors) == ["viewport"]
        assert errors[0].error_type == "missing_field"

    @pytest.mark.unit
    def test_unknown_viewport(self):
        """Unknown viewport names are rejected."""
        errors = validate_document('{"viewport": "watch"}')
        assert errors[0].path == "viewport"
        assert errors[0].error_type == "invalid_value"
        assert "'mobile'" in errors[0].message

    @pytest.mark.unit
    def test_unknown_direction(self, sample_document_dict):
        """Only LR and TD are accepted."""
        sample_document_dict["direction"] = "RL"
        errors = validate_document(sample_document_dict)
        assert _paths(errors) == ["direction"]

    @pytest.mark.unit
    def test_screens_must_be_list(self, sample_document_dict):
        """A non-list screens field stops validation."""
        sample_document_dict["screens"] = {"id": "login"}
        errors = validate_document(sample_document_dict)
        assert _paths(errors) == ["screens"]

    @pytest.mark.unit
    def test_top_level_must_be_screen(self, sample_document_dict):
        """Only screens may appear directly under screens."""
        sample_document_dict["screens"][1]["type"] = "card"
        errors = validate_document(sample_document_dict)
        assert _paths(errors) == ["screens[1]"]
        assert errors[0].error_type == "invalid_type"


class TestValidateDocumentComponents:
    """Tests for per-component checks."""

    @pytest.mark.unit
    def test_nested_bounds_path(self, sample_document_dict):
        """Errors deep in the tree carry the full JSON path."""
        button = sample_document_dict["screens"][0]["children"][0]["children"][2]
        button["bounds"]["x"] = "10"
        errors = validate_document(sample_document_dict)
        assert _paths(errors) == ["screens[0].children[0].children[2].bounds.x"]
        assert errors[0].message == "bounds.x must be a number"

    @pytest.mark.unit
    def test_boolean_is_not_a_number(self, sample_document_dict):
        """JSON booleans are not accepted as coordinates."""
        sample_document_dict["screens"][1]["bounds"]["height"] = True
        errors = validate_document(sample_document_dict)
        assert _paths(errors) == ["screens[1].bounds.height"]

    @pytest.mark.unit
    def test_missing_bounds(self, sample_document_dict):
        """Components without bounds are reported."""
        del sample_document_dict["screens"][1]["children"][0]["bounds"]
        errors = validate_document(sample_document_dict)
        assert _paths(errors) == ["screens[1].children[0]"]
        assert errors[0].message == "Missing required field 'bounds'"

    @pytest.mark.unit
    def test_missing_id(self, sample_document_dict):
        """Blank ids are rejected."""
        sample_document_dict["screens"][1]["children"][1]["id"] = "  "
        errors = validate_document(sample_document_dict)
        assert _paths(errors) == ["screens[1].children[1]"]
        assert "'id'" in errors[0].message

    @pytest.mark.unit
    def test_missing_type(self, sample_document_dict):
        """Components without a type are reported."""
        del sample_document_dict["screens"][1]["children"][0]["type"]
        errors = validate_document(sample_document_dict)
        assert errors[0].message == "Missing required field 'type'"

    @pytest.mark.unit
    def test_unknown_type_suggests_alias(self, sample_document_dict):
        """Known aliases produce a hint towards the canonical kind."""
        sample_document_dict["screens"][0]["children"][0]["type"] = "column"
        errors = validate_document(sample_document_dict)
        assert len(errors) == 1
        assert errors[0].error_type == "unknown_type"
        assert "did you mean 'col'" in errors[0].message

    @pytest.mark.unit
    def test_unknown_type_without_alias(self, sample_document_dict):
        """Unrecognized kinds get no hint."""
        sample_document_dict["screens"][1]["children"][0]["type"] = "carousel"
        errors = validate_document(sample_document_dict)
        assert errors[0].message == "Unknown component type 'carousel'"

    @pytest.mark.unit
    def test_screen_requires_name(self, sample_document_dict):
        """Screens need a non-blank name."""
        sample_document_dict["screens"][0]["name"] = " "
        errors = validate_document(sample_document_dict)
        assert errors[0].path == "screens[0]"
        assert errors[0].message == "Missing required field 'name' for screen component"

    @pytest.mark.unit
    def test_button_requires_label(self, sample_document_dict):
        """Buttons need a label."""
        del sample_document_dict["screens"][0]["children"][0]["children"][2]["label"]
        errors = validate_document(sample_document_dict)
        assert errors[0].message == "Missing required field 'label' for button component"

    @pytest.mark.unit
    def test_text_allows_empty_content(self, sample_document_dict):
        """Text content may be empty but must be a string."""
        title = sample_document_dict["screens"][0]["children"][0]["children"][0]
        title["content"] = ""
        assert validate_document(sample_document_dict) == []

        title["content"] = 42
        errors = validate_document(sample_document_dict)
        assert errors[0].message == "Missing required field 'content' for title component"

    @pytest.mark.unit
    def test_list_requires_items(self, sample_document_dict):
        """List-like components need an items array."""
        sample_document_dict["screens"][1]["children"][1]["items"] = "a, b"
        errors = validate_document(sample_document_dict)
        assert errors[0].message == "Missing required field 'items' for list component"

    @pytest.mark.unit
    def test_container_requires_children(self, sample_document_dict):
        """Containers need a children array."""
        del sample_document_dict["screens"][0]["children"][0]["children"]
        errors = validate_document(sample_document_dict)
        assert _paths(errors) == ["screens[0].children[0]"]
        assert "'children'" in errors[0].message

    @pytest.mark.unit
    def test_duplicate_ids_across_screens(self, sample_document_dict):
        """Ids must be unique across the whole document."""
        sample_document_dict["screens"][1]["children"][1]["id"] = "email"
        errors = validate_document(sample_document_dict)
        assert len(errors) == 1
        assert errors[0].error_type == "duplicate_id"
        assert errors[0].path == "screens[1].children[1]"
        assert "screens[0].children[0].children[1]" in errors[0].message

    @pytest.mark.unit
    def test_reports_every_error(self, sample_document_dict):
        """Independent problems are all reported, in document order."""
        sample_document_dict["screens"][0]["name"] = ""
        del sample_document_dict["screens"][1]["children"][1]["items"]
        errors = validate_document(sample_document_dict)
        assert _paths(errors) == ["screens[0]", "screens[1].children[1]"]


class TestValidateTree:
    """Tests for validate_tree function."""

    @pytest.mark.unit
    def test_valid_tree(self, dashboard_screen):
        """Well-formed tree passes validation."""
        assert validate_tree(dashboard_screen) == []
        assert is_valid(dashboard_screen)

    @pytest.mark.unit
    def test_duplicate_ids(self):
        """Duplicate IDs are detected."""
        node = ColumnNode(
            id="root",
            children=[
                LeafNode(id="dupe", type="icon"),
                LeafNode(id="dupe", type="image"),
            ],
        )
        errors = validate_tree(node)
        assert len(errors) == 1
        assert errors[0].error_type == "duplicate_id"
        assert "appears 2 times" in errors[0].message
        assert not is_valid(node)

    @pytest.mark.unit
    def test_negative_numbers(self):
        """Values the engine would clamp are reported."""
        node = RowNode(
            id="root",
            gap=-4,
            children=[LeafNode(id="a", type="icon", flex=-1)],
        )
        errors = validate_tree(node)
        assert {(e.path, e.error_type) for e in errors} == {
            ("root", "invalid_number"),
            ("a", "invalid_number"),
        }

    @pytest.mark.unit
    def test_non_finite_padding(self):
        """NaN and infinity are reported."""
        node = ColumnNode(id="root", padding=float("inf"))
        errors = validate_tree(node)
        assert len(errors) == 1
        assert errors[0].message.startswith("padding inf")

    @pytest.mark.unit
    def test_cycle(self):
        """A container that contains itself is reported once."""
        node = ColumnNode(id="loop")
        node.children.append(node)
        errors = validate_tree(node)
        assert len(errors) == 1
        assert errors[0].error_type == "cycle"
        assert errors[0].path == "loop"


class TestCheckLayoutFill:
    """Tests for check_layout_fill function."""

    @pytest.mark.unit
    def test_dashboard_fills(self, dashboard_screen):
        """Nested flexible trees fill every container."""
        assert check_layout_fill(dashboard_screen, Bounds(width=375, height=600)) == []
        odd = Bounds(x=13, y=7, width=777.3, height=611.1)
        assert check_layout_fill(dashboard_screen, odd) == []

    @pytest.mark.unit
    def test_leaf_root(self):
        """A leaf has nothing to fill."""
        leaf = LeafNode(id="a", type="icon")
        assert check_layout_fill(leaf, Bounds(width=10, height=10)) == []

    @pytest.mark.unit
    def test_sizeless_fixed_child_overflows(self):
        """A fixed child without a size takes a flex share on top of the flex space."""
        row = RowNode(
            id="row",
            children=[
                LeafNode(id="a", type="icon", flex=0),
                LeafNode(id="b", type="text"),
            ],
        )
        errors = check_layout_fill(row, Bounds(width=300, height=50))
        assert len(errors) == 1
        assert errors[0].error_type == "fill_mismatch"
        assert errors[0].path == "row"
        assert "600px of 300px" in errors[0].message

    @pytest.mark.unit
    def test_tolerance_override(self):
        """A wide tolerance accepts the mismatch."""
        row = RowNode(
            id="row",
            children=[
                LeafNode(id="a", type="icon", flex=0),
                LeafNode(id="b", type="text"),
            ],
        )
        assert check_layout_fill(row, Bounds(width=300, height=50), tolerance=1000) == []

    @pytest.mark.unit
    def test_tolerance_from_environment(self, monkeypatch):
        """WIREFRAME_FLOAT_TOLERANCE is used when no tolerance is passed."""
        monkeypatch.setenv("WIREFRAME_FLOAT_TOLERANCE", "1000")
        row = RowNode(
            id="row",
            children=[
                LeafNode(id="a", type="icon", flex=0),
                LeafNode(id="b", type="text"),
            ],
        )
        assert check_layout_fill(row, Bounds(width=300, height=50)) == []

    @pytest.mark.unit
    def test_overflowing_fixed_children_not_checked(self):
        """Fixed sizes that exceed the container are left as requested."""
        col = ColumnNode(
            id="col",
            children=[
                LeafNode(id="a", type="image", flex=0, bounds=Bounds(height=400)),
                LeafNode(id="b", type="text"),
            ],
        )
        assert check_layout_fill(col, Bounds(width=100, height=300)) == []

    @pytest.mark.unit
    def test_explicit_cross_size_allowed(self):
        """A child may exceed the cross extent when it asks for it."""
        row = RowNode(
            id="row",
            children=[LeafNode(id="a", type="image", bounds=Bounds(height=80))],
        )
        assert check_layout_fill(row, Bounds(width=100, height=50)) == []

    @pytest.mark.unit
    def test_cycle_raises(self):
        """Cycles surface as InvalidTreeError."""
        node = ColumnNode(id="loop")
        node.children.append(node)
        with pytest.raises(InvalidTreeError):
            check_layout_fill(node, Bounds(width=10, height=10))
