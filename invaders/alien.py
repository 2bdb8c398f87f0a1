"""The invaders marching across the screen."""

from __future__ import annotations

from invaders.shapes import Rect

POINTS = {1: 100, 2: 200, 3: 300}


class Alien:
    """One invader of kind 1, 2 or 3 with its sprite size."""

    def __init__(self, kind: int, x: float, y: float, width: float, height: float) -> None:
        if kind not in POINTS:
            raise ValueError(f"alien kind must be 1, 2 or 3, not {kind}")
        self.kind = kind
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height

    def update(self, direction: float) -> None:
        """Step sideways by ``direction`` pixels."""
        self.x += direction

    def rect(self) -> Rect:
        """The alien's hit box."""
        return Rect(self.x, self.y, float(self.width), float(self.height))

    def points(self) -> int:
        """Score awarded for shooting this alien."""
        return POINTS[self.kind]