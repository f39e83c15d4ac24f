"""Command-line interface for wireframe-layout."""

from wireframe_layout.cli.lib import (
    cmd_layout,
    cmd_test,
    cmd_validate,
    cmd_viewport,
    handle_layout_command,
    handle_validate_command,
    handle_viewport_command,
    main,
    show_help,
)

__all__ = [
    "cmd_layout",
    "cmd_validate",
    "cmd_viewport",
    "cmd_test",
    "handle_layout_command",
    "handle_validate_command",
    "handle_viewport_command",
    "show_help",
    "main",
]
