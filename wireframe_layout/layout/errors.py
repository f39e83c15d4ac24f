"""Error kinds raised by the layout engine.

Malformed numbers never raise; they are clamped. Only caller precondition
violations surface as exceptions.
"""


class LayoutError(Exception):
    """Base error for layout failures."""


class UnknownKindError(LayoutError):
    """A node kind outside the closed component vocabulary reached the engine."""

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"Unknown component kind: {kind!r}")


class InvalidTreeError(LayoutError):
    """The component tree is not a strict ownership hierarchy."""

    def __init__(self, node_id: str, message: str | None = None):
        self.node_id = node_id
        super().__init__(
            message or f"Cycle detected: node '{node_id}' is its own ancestor"
        )


class InvalidScreenCountError(LayoutError):
    """A canvas was requested for fewer than one screen."""

    def __init__(self, screen_count: int):
        self.screen_count = screen_count
        super().__init__(f"screen_count must be at least 1, got {screen_count}")


__all__ = [
    "LayoutError",
    "UnknownKindError",
    "InvalidTreeError",
    "InvalidScreenCountError",
]
