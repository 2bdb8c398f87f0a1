"""Axis-aligned rectangles and the small blocks that obstacles are built from."""

from __future__ import annotations

from dataclasses import dataclass

BLOCK_SIZE = 3
BLOCK_COLOR = (243, 216, 63)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap (touching edges do not count)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass(frozen=True)
class Block:
    """One square piece of an obstacle."""

    x: float
    y: float

    def rect(self) -> Rect:
        """The block's hit box."""
        return Rect(self.x, self.y, BLOCK_SIZE, BLOCK_SIZE)