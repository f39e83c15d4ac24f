"""Core utilities shared by every wireframe-layout package."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
