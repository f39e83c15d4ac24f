"""Unit tests for the schema module."""

import pytest

from wireframe_layout.schema import (
    COMPONENT_REGISTRY,
    CONTAINER_KINDS,
    Alignment,
    ComponentCategory,
    ComponentKind,
    Direction,
    Orientation,
    Viewport,
    get_component_category,
    get_component_meta,
    get_components_by_category,
    is_container_kind,
    resolve_alias,
)


class TestEnums:
    """Tests for the closed vocabularies."""

    @pytest.mark.unit
    def test_alignment_values(self):
        assert {a.value for a in Alignment} == {"start", "center", "end"}

    @pytest.mark.unit
    def test_orientation_values(self):
        assert {o.value for o in Orientation} == {"vertical", "horizontal"}

    @pytest.mark.unit
    def test_viewport_values(self):
        assert {v.value for v in Viewport} == {"mobile", "tablet", "desktop"}

    @pytest.mark.unit
    def test_direction_values(self):
        assert {d.value for d in Direction} == {"LR", "TD"}

    @pytest.mark.unit
    def test_all_kinds_exist(self):
        """All expected component kinds are defined."""
        expected = {
            "screen",
            "col",
            "row",
            "card",
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
        }
        assert {k.value for k in ComponentKind} == expected


class TestRegistry:
    """Tests for the component registry."""

    @pytest.mark.unit
    def test_every_kind_registered(self):
        assert set(COMPONENT_REGISTRY) == set(ComponentKind)

    @pytest.mark.unit
    def test_container_kinds(self):
        assert CONTAINER_KINDS == {
            ComponentKind.SCREEN,
            ComponentKind.COLUMN,
            ComponentKind.ROW,
            ComponentKind.CARD,
        }

    @pytest.mark.unit
    def test_required_fields(self):
        """Per-kind required payload fields match the renderer contract."""
        required = {
            kind: {req.name for req in meta.required_fields}
            for kind, meta in COMPONENT_REGISTRY.items()
            if meta.required_fields
        }
        assert required == {
            ComponentKind.SCREEN: {"name"},
            ComponentKind.BUTTON: {"label"},
            ComponentKind.TEXT: {"content"},
            ComponentKind.TITLE: {"content"},
            ComponentKind.LIST: {"items"},
            ComponentKind.NAVMENU: {"items"},
            ComponentKind.BOTTOMNAV: {"items"},
        }

    @pytest.mark.unit
    def test_meta_to_dict(self):
        data = get_component_meta(ComponentKind.SCREEN).to_dict()
        assert data["kind"] == "screen"
        assert data["is_container"] is True
        assert data["required_fields"] == ["name"]

    @pytest.mark.unit
    def test_meta_accepts_raw_value(self):
        assert get_component_meta("row").kind is ComponentKind.ROW

    @pytest.mark.unit
    def test_meta_unknown_kind_raises_key_error(self):
        with pytest.raises(KeyError):
            get_component_meta("carousel")

    @pytest.mark.unit
    def test_category_lookup(self):
        assert get_component_category("button") is ComponentCategory.CONTROL
        assert get_component_category(ComponentKind.CARD) is ComponentCategory.CONTAINER

    @pytest.mark.unit
    def test_components_by_category(self):
        nav = get_components_by_category(ComponentCategory.NAVIGATION)
        assert set(nav) == {
            ComponentKind.APPBAR,
            ComponentKind.BOTTOMNAV,
            ComponentKind.NAVMENU,
        }


class TestIsContainerKind:
    """Tests for is_container_kind."""

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", ["screen", "col", "row", "card"])
    def test_containers(self, kind):
        assert is_container_kind(kind)

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", ["button", "text", "list", "divider"])
    def test_leaves(self, kind):
        assert not is_container_kind(kind)

    @pytest.mark.unit
    def test_unknown_kind(self):
        assert not is_container_kind("grid")


class TestResolveAlias:
    """Tests for alias resolution."""

    @pytest.mark.unit
    def test_canonical_value(self):
        assert resolve_alias("row") is ComponentKind.ROW

    @pytest.mark.unit
    def test_alias(self):
        assert resolve_alias("column") is ComponentKind.COLUMN
        assert resolve_alias("Toolbar") is ComponentKind.APPBAR

    @pytest.mark.unit
    def test_unknown(self):
        assert resolve_alias("hologram") is None
