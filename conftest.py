"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Sample wireframe documents and component trees shared by all test modules
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from dotenv import load_dotenv

if TYPE_CHECKING:
    from wireframe_layout.ir import ScreenNode, WireframeDocument

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Document Fixtures
# =============================================================================


@pytest.fixture
def sample_document_dict() -> dict[str, Any]:
    """Raw two-screen wireframe as it arrives from storage.

    Returns:
        A JSON-compatible dict with a login screen and a home screen.
    """
    return {
        "viewport": "tablet",
        "direction": "TD",
        "screens": [
            {
                "id": "login",
                "type": "screen",
                "name": "Login",
                "bounds": {"x": 0, "y": 0, "width": 0, "height": 0},
                "children": [
                    {
                        "id": "login-form",
                        "type": "col",
                        "bounds": {"x": 0, "y": 0, "width": 0, "height": 0},
                        "padding": 24,
                        "gap": 16,
                        "children": [
                            {
                                "id": "login-title",
                                "type": "title",
                                "content": "Welcome back",
                                "flex": 0,
                                "bounds": {"x": 0, "y": 0, "width": 0, "height": 40},
                            },
                            {
                                "id": "email",
                                "type": "input",
                                "placeholder": "Email",
                                "flex": 0,
                                "bounds": {"x": 0, "y": 0, "width": 0, "height": 44},
                            },
                            {
                                "id": "submit",
                                "type": "button",
                                "label": "Sign in",
                                "align": "center",
                                "flex": 0,
                                "bounds": {"x": 0, "y": 0, "width": 160, "height": 44},
                            },
                            {
                                "id": "spacer",
                                "type": "divider",
                                "bounds": {"x": 0, "y": 0, "width": 0, "height": 0},
                            },
                        ],
                    }
                ],
            },
            {
                "id": "home",
                "type": "screen",
                "name": "Home",
                "bounds": {"x": 0, "y": 0, "width": 0, "height": 0},
                "children": [
                    {
                        "id": "home-bar",
                        "type": "appbar",
                        "title": "Home",
                        "flex": 0,
                        "bounds": {"x": 0, "y": 0, "width": 0, "height": 56},
                    },
                    {
                        "id": "feed",
                        "type": "list",
                        "items": [{"id": "i1", "label": "First"}],
                        "bounds": {"x": 0, "y": 0, "width": 0, "height": 0},
                    },
                ],
            },
        ],
    }


@pytest.fixture
def sample_document(sample_document_dict: dict[str, Any]) -> WireframeDocument:
    """Parsed form of ``sample_document_dict``."""
    from wireframe_layout.ir import WireframeDocument

    return WireframeDocument.model_validate(sample_document_dict)


@pytest.fixture
def dashboard_screen() -> ScreenNode:
    """Create a nested dashboard screen for testing.

    Every container holds at least one flexible child, so children always
    fill their parent's content area exactly.

    Returns:
        A screen with app bar, sidebar, nested cards and bottom navigation.
    """
    from wireframe_layout.ir import (
        Bounds,
        CardNode,
        ColumnNode,
        LeafNode,
        RowNode,
        ScreenNode,
    )

    return ScreenNode(
        id="dashboard",
        name="Dashboard",
        padding=8,
        gap=8,
        children=[
            LeafNode(id="appbar", type="appbar", flex=0, bounds=Bounds(height=56)),
            RowNode(
                id="body",
                gap=12,
                children=[
                    LeafNode(
                        id="sidebar",
                        type="navmenu",
                        flex=0,
                        bounds=Bounds(width=160),
                        items=[{"label": "Overview"}, {"label": "Reports"}],
                    ),
                    ColumnNode(
                        id="main",
                        padding=12,
                        gap=12,
                        children=[
                            LeafNode(
                                id="heading",
                                type="title",
                                content="Overview",
                                flex=0,
                                bounds=Bounds(height=32),
                            ),
                            CardNode(
                                id="stats",
                                title="Stats",
                                flex=2,
                                padding=8,
                                gap=8,
                                children=[
                                    RowNode(
                                        id="kpis",
                                        gap=8,
                                        children=[
                                            LeafNode(id="kpi-1", type="image"),
                                            LeafNode(id="kpi-2", type="image"),
                                            LeafNode(id="kpi-3", type="image"),
                                        ],
                                    ),
                                    LeafNode(
                                        id="caption",
                                        type="text",
                                        content="Last 30 days",
                                    ),
                                ],
                            ),
                            LeafNode(
                                id="activity",
                                type="list",
                                flex=3,
                                items=[{"id": "a1", "label": "Signed in"}],
                            ),
                        ],
                    ),
                ],
            ),
            LeafNode(
                id="tabs",
                type="bottomnav",
                flex=0,
                bounds=Bounds(height=64),
                items=[{"label": "Home"}, {"label": "Profile"}],
            ),
        ],
    )
