"""Command handlers for the wireframe-layout CLI.

Each ``handle_*_command`` parses its own arguments and returns a process exit
code. Errors are caught at this boundary, logged and turned into a non-zero
exit code; the library packages underneath raise.
"""

import argparse
import json
import subprocess
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError as ModelValidationError

from wireframe_layout.config import (
    get_default_direction,
    get_default_viewport,
    get_log_level,
)
from wireframe_layout.core import get_logger, setup_logging
from wireframe_layout.ir import WireframeDocument
from wireframe_layout.layout import (
    LayoutError,
    get_screen_frames,
    get_screen_origin,
    get_viewport_dimensions,
)
from wireframe_layout.output import generate_output
from wireframe_layout.schema import Direction, Viewport
from wireframe_layout.validation import (
    ValidationError,
    check_layout_fill,
    validate_document,
    validate_tree,
)

logger = get_logger("cli")


def _apply_settings(
    data: dict[str, Any],
    viewport: str | None = None,
    direction: str | None = None,
) -> dict[str, Any]:
    """Fill viewport and direction in a decoded document.

    Resolution for each: command-line flag > document field > environment.
    """
    data["viewport"] = viewport or data.get("viewport") or get_default_viewport().value
    data["direction"] = (
        direction or data.get("direction") or get_default_direction().value
    )
    return data


def _read_document(
    path: Path,
    viewport: str | None = None,
    direction: str | None = None,
) -> WireframeDocument:
    """Load a wireframe file, filling viewport and direction when absent."""
    data: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")

    return WireframeDocument.model_validate(_apply_settings(data, viewport, direction))


# =============================================================================
# Layout Command
# =============================================================================


def cmd_layout(args: argparse.Namespace) -> int:
    """Handle the layout command."""
    try:
        document = _read_document(args.file, args.viewport, args.direction)
        output = generate_output(document)
    except (OSError, ValueError, ModelValidationError, LayoutError) as e:
        logger.error(f"Layout failed: {e}")
        return 1

    if args.format == "tree":
        result_text = output.text_tree
    else:
        result_text = output.to_json()

    if args.output:
        args.output.write_text(result_text + "\n", encoding="utf-8")
        logger.info(f"Layout saved to {args.output}")
    else:
        print(result_text)

    logger.info(
        f"Laid out {len(document.screens)} screen(s) on a "
        f"{output.layout.dimensions.width:g}x{output.layout.dimensions.height:g} canvas"
    )
    return 0


def handle_layout_command(argv: list[str]) -> int:
    """Handle layout-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . layout",
        description="Compute the bounds of every component in a wireframe file",
    )
    parser.add_argument(
        "file",
        type=Path,
        help="Wireframe JSON file",
    )
    parser.add_argument(
        "--viewport",
        "-v",
        type=str,
        default=None,
        choices=[v.value for v in Viewport],
        help="Viewport override (default: document value, then WIREFRAME_VIEWPORT)",
    )
    parser.add_argument(
        "--direction",
        "-d",
        type=str,
        default=None,
        choices=[d.value for d in Direction],
        help="Screen arrangement override (default: document, then WIREFRAME_DIRECTION)",
    )
    parser.add_argument(
        "--format",
        "-f",
        type=str,
        default="json",
        choices=["json", "tree"],
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )

    args = parser.parse_args(argv)
    return cmd_layout(args)


# =============================================================================
# Validate Command
# =============================================================================


def _tree_errors(document: WireframeDocument) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for frame in get_screen_frames(document):
        errors.extend(validate_tree(frame.screen))
        errors.extend(check_layout_fill(frame.screen, frame.bounds))
    return errors


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command.

    Missing viewport and direction are filled the same way the layout
    command fills them. Raw structure is checked first; tree and fill checks
    only run on documents that parse.
    """
    try:
        text = args.file.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Cannot read {args.file}: {e}")
        return 1

    content: str | dict[str, Any] = text
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None
    if isinstance(data, dict):
        content = _apply_settings(data, args.viewport, args.direction)

    errors = validate_document(content)
    if not errors:
        try:
            if isinstance(content, dict):
                document = WireframeDocument.model_validate(content)
            else:
                document = WireframeDocument.from_json(content)
            errors = _tree_errors(document)
        except ModelValidationError as e:
            errors = [
                ValidationError(
                    path=".".join(str(part) for part in err["loc"]),
                    message=err["msg"],
                    error_type="invalid_value",
                )
                for err in e.errors()
            ]

    if not errors:
        print(f"{args.file}: valid")
        return 0

    for error in errors:
        location = error.path or "<root>"
        print(f"{args.file}: {location}: {error.message} [{error.error_type}]")
    logger.error(f"{len(errors)} validation error(s) in {args.file}")
    return 1


def handle_validate_command(argv: list[str]) -> int:
    """Handle validate-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . validate",
        description="Check a wireframe file for structural errors",
    )
    parser.add_argument(
        "file",
        type=Path,
        help="Wireframe JSON file",
    )
    parser.add_argument(
        "--viewport",
        "-v",
        type=str,
        default=None,
        choices=[v.value for v in Viewport],
        help="Viewport override (default: document value, then WIREFRAME_VIEWPORT)",
    )
    parser.add_argument(
        "--direction",
        "-d",
        type=str,
        default=None,
        choices=[d.value for d in Direction],
        help="Screen arrangement override (default: document, then WIREFRAME_DIRECTION)",
    )

    args = parser.parse_args(argv)
    return cmd_validate(args)


# =============================================================================
# Viewport Command
# =============================================================================


def cmd_viewport(args: argparse.Namespace) -> int:
    """Handle the viewport command."""
    try:
        dimensions = get_viewport_dimensions(args.viewport, args.direction, args.count)
    except LayoutError as e:
        logger.error(str(e))
        return 1

    print(f"Canvas: {dimensions.width:g}x{dimensions.height:g}")
    for index in range(args.count):
        x, y = get_screen_origin(args.viewport, args.direction, index)
        print(f"  screen {index}: origin ({x:g}, {y:g})")
    return 0


def handle_viewport_command(argv: list[str]) -> int:
    """Handle viewport-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . viewport",
        description="Show canvas dimensions for a number of screens",
    )
    parser.add_argument(
        "viewport",
        type=str,
        choices=[v.value for v in Viewport],
        help="Viewport class",
    )
    parser.add_argument(
        "direction",
        type=str,
        choices=[d.value for d in Direction],
        help="LR for side by side, TD for stacked",
    )
    parser.add_argument(
        "count",
        type=int,
        help="Number of screens",
    )

    args = parser.parse_args(argv)
    return cmd_viewport(args)


# =============================================================================
# Test Command
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments and test tier options.

    Usage:
        python . test                # Run all tests
        python . test --unit         # Run only unit tests
        python . test --integration  # Run CLI and file tests
        python . test --all          # Run all tests explicitly
        python . test -k "flex"      # Run tests matching pattern
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--integration": ["-m", "integration"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


# =============================================================================
# Entry Point
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Layout ===")
    print("  layout     Compute component bounds for a wireframe file")
    print("  validate   Check a wireframe file for structural errors")
    print("  viewport   Show canvas dimensions for a number of screens")
    print("\n=== Development ===")
    print("  test       Run the test suite")
    print("\nExamples:")
    print("  python . layout wireframe.json                 # JSON bounds to stdout")
    print("  python . layout wireframe.json -f tree         # Annotated tree")
    print("  python . layout wireframe.json -v tablet -o out.json")
    print("  python . validate wireframe.json")
    print("  python . viewport mobile LR 3")
    print("  python . test --unit")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    load_dotenv()

    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        show_help()
        return 1

    command = argv[0]
    rest_args = argv[1:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "layout": lambda: handle_layout_command(rest_args),
        "validate": lambda: handle_validate_command(rest_args),
        "viewport": lambda: handle_viewport_command(rest_args),
        "test": lambda: cmd_test(rest_args),
    }

    setup_logging(get_log_level())

    if command in commands:
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


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
