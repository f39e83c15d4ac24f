"""Centralized configuration management for wireframe-layout.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from wireframe_layout.config import EnvVar, get_environment
    >>>
    >>> # Get any environment variable with automatic type conversion
    >>> indent = get_environment(EnvVar.WIREFRAME_JSON_INDENT)  # Returns int: 2
    >>>
    >>> # Override at runtime
    >>> viewport = get_environment(EnvVar.WIREFRAME_VIEWPORT, override="tablet")

Environment Variable Categories:
    layout: Document defaults used when a wireframe omits them
    output: Formatting of CLI output
    logging: Log verbosity
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Convenience functions
    get_default_direction,
    get_default_viewport,
    # Main interface
    get_environment,
    get_environment_info,
    get_float_tolerance,
    get_json_indent,
    get_log_level,
    # Introspection
    list_environment_variables,
)

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
