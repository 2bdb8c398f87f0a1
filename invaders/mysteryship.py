"""The bonus ship that crosses the top of the screen."""

from __future__ import annotations

import random

from invaders.shapes import Rect

MARGIN = 25
START_Y = 90
SPEED = 3


class MysteryShip:
    """A bonus ship that appears from a random side and flies across."""

    def __init__(
        self,
        screen_width: int,
        width: int,
        height: int,
        rng: random.Random | None = None,
    ) -> None:
        self.screen_width = screen_width
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.alive = False
        self.x = float(MARGIN)
        self.y = float(START_Y)
        self.speed = SPEED

    def spawn(self) -> None:
        """Appear at the left or right edge, heading inward."""
        self.y = float(START_Y)
        if self.rng.randint(0, 1) == 0:
            self.x = float(MARGIN)
            self.speed = SPEED
        else:
            self.x = float(self.screen_width) - self.width - MARGIN
            self.speed = -SPEED
        self.alive = True

    def update(self) -> None:
        """Fly one step; vanish once past either edge."""
        if self.alive:
            self.x += self.speed
            if self.x > self.screen_width - self.width - MARGIN or self.x < MARGIN:
                self.alive = False

    def rect(self) -> Rect:
        """Hit box; empty while the ship is not alive."""
        if self.alive:
            return Rect(self.x, self.y, float(self.width), float(self.height))
        return Rect(self.x, self.y, 0.0, 0.0)