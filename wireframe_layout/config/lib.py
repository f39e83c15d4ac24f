"""Centralized environment configuration management for wireframe-layout.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

The layout engine itself never reads configuration. These values only
supply defaults to the CLI and other outer surfaces.

Example:
    >>> from wireframe_layout.config import EnvVar, get_environment
    >>>
    >>> indent = get_environment(EnvVar.WIREFRAME_JSON_INDENT)  # Returns int
    >>> viewport = get_environment(EnvVar.WIREFRAME_VIEWPORT, override="desktop")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

from wireframe_layout.schema import Direction, Viewport

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "WIREFRAME_VIEWPORT").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, float).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by wireframe-layout.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - layout: Document defaults
        - output: CLI output formatting
        - logging: Log verbosity
    """

    # -------------------------------------------------------------------------
    # Layout Defaults
    # -------------------------------------------------------------------------
    WIREFRAME_VIEWPORT = EnvConfig(
        name="WIREFRAME_VIEWPORT",
        default=Viewport.MOBILE.value,
        var_type=str,
        description="Viewport used when a document omits one (mobile, tablet, desktop)",
        category="layout",
    )
    WIREFRAME_DIRECTION = EnvConfig(
        name="WIREFRAME_DIRECTION",
        default=Direction.LR.value,
        var_type=str,
        description="Screen arrangement used when a document omits one (LR, TD)",
        category="layout",
    )
    WIREFRAME_FLOAT_TOLERANCE = EnvConfig(
        name="WIREFRAME_FLOAT_TOLERANCE",
        default=1e-6,
        var_type=float,
        description="Tolerance used when checking that children fill their container",
        category="layout",
    )

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------
    WIREFRAME_JSON_INDENT = EnvConfig(
        name="WIREFRAME_JSON_INDENT",
        default=2,
        var_type=int,
        description="Indentation for JSON output (0 for compact)",
        category="output",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    WIREFRAME_LOG_LEVEL = EnvConfig(
        name="WIREFRAME_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for the CLI (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is float:
        try:
            return float(value)
        except ValueError:
            return default

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: float) -> float: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type.

    Example:
        >>> get_environment(EnvVar.WIREFRAME_JSON_INDENT)
        2
        >>> get_environment(EnvVar.WIREFRAME_JSON_INDENT, override=4)
        4
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_default_viewport(override: Viewport | str | None = None) -> Viewport:
    """Get the viewport used when a document does not name one.

    Resolution: override > WIREFRAME_VIEWPORT > mobile. Unrecognized
    values fall back to the built-in default.
    """
    value = get_environment(EnvVar.WIREFRAME_VIEWPORT, override=override)
    try:
        return Viewport(value)
    except ValueError:
        return Viewport(EnvVar.WIREFRAME_VIEWPORT.value.default)


def get_default_direction(override: Direction | str | None = None) -> Direction:
    """Get the screen arrangement used when a document does not name one.

    Resolution: override > WIREFRAME_DIRECTION > LR.
    """
    value = get_environment(EnvVar.WIREFRAME_DIRECTION, override=override)
    try:
        return Direction(value)
    except ValueError:
        return Direction(EnvVar.WIREFRAME_DIRECTION.value.default)


def get_log_level(override: str | None = None) -> str:
    """Get the configured log level name."""
    return str(get_environment(EnvVar.WIREFRAME_LOG_LEVEL, override=override)).upper()


def get_json_indent(override: int | None = None) -> int | None:
    """Get JSON indentation. Zero or negative means compact output."""
    indent = get_environment(EnvVar.WIREFRAME_JSON_INDENT, override=override)
    return indent if indent > 0 else None


def get_float_tolerance(override: float | None = None) -> float:
    """Get the tolerance for container fill checks."""
    return abs(get_environment(EnvVar.WIREFRAME_FLOAT_TOLERANCE, override=override))


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (layout, output, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_default_viewport",
    "get_default_direction",
    "get_log_level",
    "get_json_indent",
    "get_float_tolerance",
    # Introspection
    "list_environment_variables",
]
