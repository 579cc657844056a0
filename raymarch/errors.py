"""
Error types raised by the raymarch core.
"""

from __future__ import annotations


class RaymarchError(Exception):
    """Base class for all raymarch errors."""


class OutOfBounds(RaymarchError, IndexError):
    """A grid index computed from a world coordinate lies outside the grid."""

    def __init__(self, col: int, row: int, width: int, height: int) -> None:
        super().__init__(
            f"cell ({col}, {row}) is outside grid of size {width}x{height}"
        )
        self.col = col
        self.row = row


class InvalidConfiguration(RaymarchError, ValueError):
    """Non-positive ray count, field of view, grid dimensions or similar."""
