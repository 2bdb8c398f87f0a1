"""The player's cannon."""

from __future__ import annotations

import time
from typing import Callable

from invaders.laser import Laser
from invaders.shapes import Rect

MARGIN = 25
BOTTOM_MARGIN = 100
STEP = 7
FIRE_INTERVAL = 0.35
LASER_SPEED = -6


class Spaceship:
    """The player ship: moves sideways and fires upward lasers."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        width: int,
        height: int,
        clock: Callable[[], float] = time.monotonic,
        on_fire: Callable[[], None] | None = None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.width = width
        self.height = height
        self.clock = clock
        self.on_fire = on_fire
        self.x = float((screen_width - width) // 2)
        self.y = float(screen_height - height - BOTTOM_MARGIN)
        self.last_fire_time = 0.0
        self.lasers: list[Laser] = []

    def move_left(self) -> None:
        """Step left, stopping at the margin."""
        self.x = max(self.x - STEP, MARGIN)

    def move_right(self) -> None:
        """Step right, stopping at the margin."""
        self.x = min(self.x + STEP, self.screen_width - self.width - MARGIN)

    def fire_laser(self) -> bool:
        """Fire a laser if the cool-down has passed; return whether one was fired."""
        if self.clock() - self.last_fire_time < FIRE_INTERVAL:
            return False
        self.lasers.append(Laser(self.x + self.width // 2 - 2, self.y, LASER_SPEED))
        self.last_fire_time = self.clock()
        if self.on_fire is not None:
            self.on_fire()
        return True

    def rect(self) -> Rect:
        """The ship's hit box."""
        return Rect(self.x, self.y, float(self.width), float(self.height))

    def reset(self) -> None:
        """Return to the starting spot and drop all lasers."""
        self.x = (self.screen_width - self.width) / 2.0
        self.y = float(self.screen_height - self.height - BOTTOM_MARGIN)
        self.lasers.clear()