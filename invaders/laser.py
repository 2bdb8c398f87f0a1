"""Laser shots fired by the player and by the aliens."""

from __future__ import annotations

from invaders.shapes import Rect

LASER_WIDTH = 4
LASER_HEIGHT = 15
LASER_COLOR = (243, 216, 63)
TOP_LIMIT = 25
BOTTOM_MARGIN = 100


class Laser:
    """A shot travelling vertically at a fixed speed."""

    def __init__(self, x: float, y: float, speed: int) -> None:
        self.x = float(x)
        self.y = float(y)
        self.speed = speed
        self.active = True

    def update(self, screen_height: int) -> None:
        """Move one step and switch off once past the playfield."""
        self.y += self.speed
        if self.active and (self.y > screen_height - BOTTOM_MARGIN or self.y < TOP_LIMIT):
            self.active = False

    def rect(self) -> Rect:
        """The shot's hit box."""
        return Rect(self.x, self.y, LASER_WIDTH, LASER_HEIGHT)