"""Game state and rules: waves, scoring, collisions and the high-score file."""

from __future__ import annotations

import enum
import random
import re
import sys
import time
from collections.abc import Callable, Collection
from dataclasses import dataclass
from pathlib import Path

from invaders.alien import Alien
from invaders.laser import Laser
from invaders.mysteryship import MysteryShip
from invaders.obstacle import Obstacle
from invaders.spaceship import Spaceship

ALIEN_ROWS = 5
ALIEN_COLUMNS = 11
ALIEN_SPACING = 55
ALIEN_ORIGIN_X = 75
ALIEN_ORIGIN_Y = 110
EDGE_MARGIN = 25
ALIEN_DROP = 4
ALIEN_LASER_INTERVAL = 0.35
ALIEN_LASER_SPEED = 6
MYSTERY_POINTS = 500
MYSTERY_INTERVAL_MIN = 10
MYSTERY_INTERVAL_MAX = 20
OBSTACLE_COUNT = 4
OBSTACLE_RISE = 200
START_LIVES = 3
LEVEL_SPEED_UP = 0.25

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Key(enum.Enum):
    """Keys the game reacts to."""

    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    ENTER = "enter"


@dataclass(frozen=True)
class SpriteSizes:
    """Pixel sizes (width, height) of the sprites the game needs for hit boxes."""

    aliens: tuple[tuple[int, int], tuple[int, int], tuple[int, int]]
    spaceship: tuple[int, int]
    mystery_ship: tuple[int, int]


class HighScoreStore:
    """Keeps the best score in a small text file."""

    def __init__(self, path: str | Path = "highscore.txt") -> None:
        self.path = Path(path)

    def load(self) -> int:
        """Read the stored score; 0 when the file is missing or unreadable."""
        try:
            text = self.path.read_text()
        except OSError:
            print("Failed to load highscore", file=sys.stderr)
            return 0
        match = _LEADING_INT.match(text)
        return int(match.group(1)) if match else 0

    def save(self, score: int) -> None:
        """Write ``score`` to the file, reporting on stderr if that fails."""
        try:
            self.path.write_text(str(score))
        except OSError:
            print("Failed to save highscore to file", file=sys.stderr)


def _elapsed_clock() -> Callable[[], float]:
    start = time.monotonic()
    return lambda: time.monotonic() - start


def _kind_for_row(row: int) -> int:
    if row == 0:
        return 3
    if row in (1, 2):
        return 2
    return 1


class Game:
    """One running game: the player, the alien wave, shields and scores."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        sizes: SpriteSizes,
        store: HighScoreStore | None = None,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
        on_explosion: Callable[[], None] | None = None,
        on_laser: Callable[[], None] | None = None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.sizes = sizes
        self.store = store if store is not None else HighScoreStore()
        self.clock = clock if clock is not None else _elapsed_clock()
        self.rng = rng if rng is not None else random.Random()
        self.on_explosion = on_explosion

        ship_width, ship_height = sizes.spaceship
        self.spaceship = Spaceship(
            screen_width, screen_height, ship_width, ship_height, self.clock, on_laser
        )
        mystery_width, mystery_height = sizes.mystery_ship
        self.mystery_ship = MysteryShip(screen_width, mystery_width, mystery_height, self.rng)

        self.obstacles: list[Obstacle] = []
        self.aliens: list[Alien] = []
        self.alien_lasers: list[Laser] = []
        self.aliens_direction = 1.0
        self.time_last_alien_fired = 0.0
        self.time_last_spawn = 0.0
        self.mystery_ship_spawn_interval = 0.0
        self.lives = START_LIVES
        self.score = 0
        self.level = 1
        self.highscore = 0
        self.run = True
        self.init_game()

    def _explode(self) -> None:
        if self.on_explosion is not None:
            self.on_explosion()

    def _new_spawn_interval(self) -> float:
        return float(self.rng.randint(MYSTERY_INTERVAL_MIN, MYSTERY_INTERVAL_MAX))

    def handle_input(self, keys: Collection[Key]) -> None:
        """Move and fire according to the keys held down."""
        if not self.run:
            return
        if Key.LEFT in keys:
            self.spaceship.move_left()
        elif Key.RIGHT in keys:
            self.spaceship.move_right()
        if Key.SPACE in keys:
            self.spaceship.fire_laser()

    def update(self, keys: Collection[Key] = frozenset()) -> None:
        """Advance the game by one frame; ENTER restarts after a game over."""
        if not self.run:
            if Key.ENTER in keys:
                self.reset()
                self.init_game()
            return

        if self.clock() - self.time_last_spawn > self.mystery_ship_spawn_interval:
            self.mystery_ship.spawn()
            self.time_last_spawn = self.clock()
            self.mystery_ship_spawn_interval = self._new_spawn_interval()

        for laser in self.spaceship.lasers:
            laser.update(self.screen_height)
        self.move_aliens()
        self.alien_shoot_laser()
        for laser in self.alien_lasers:
            laser.update(self.screen_height)
        self.delete_inactive_lasers()
        self.mystery_ship.update()
        self.check_for_collisions()

        if not self.aliens:
            self.reset()
            self.level_up()

    def init_game(self) -> None:
        """Start a fresh game at level 1."""
        self.obstacles = self.create_obstacles()
        self.aliens = self.create_aliens()
        self.aliens_direction = 1.0
        self.time_last_alien_fired = 0.0
        self.time_last_spawn = 0.0
        self.mystery_ship_spawn_interval = self._new_spawn_interval()
        self.lives = START_LIVES
        self.score = 0
        self.level = 1
        self.highscore = self.store.load()
        self.run = True

    def level_up(self) -> None:
        """Bring in a new, faster wave."""
        self.obstacles = self.create_obstacles()
        self.aliens = self.create_aliens()
        self.aliens_direction = abs(self.aliens_direction) + LEVEL_SPEED_UP
        self.time_last_alien_fired = 0.0
        self.time_last_spawn = 0.0
        self.level += 1
        self.mystery_ship_spawn_interval = self._new_spawn_interval()

    def reset(self) -> None:
        """Clear the field and put the player back at the start."""
        self.spaceship.reset()
        self.aliens.clear()
        self.alien_lasers.clear()
        self.obstacles.clear()

    def game_over(self) -> None:
        """Stop play until the player restarts."""
        self.run = False

    def create_obstacles(self) -> list[Obstacle]:
        """Four shields spread evenly across the screen."""
        width = Obstacle.width()
        gap = (self.screen_width - OBSTACLE_COUNT * width) // 5
        y = float(self.screen_height - OBSTACLE_RISE)
        return [
            Obstacle(float((i + 1) * gap + i * width), y) for i in range(OBSTACLE_COUNT)
        ]

    def create_aliens(self) -> list[Alien]:
        """A full wave: one row of kind 3, two of kind 2, the rest kind 1."""
        aliens = []
        for row in range(ALIEN_ROWS):
            kind = _kind_for_row(row)
            width, height = self.sizes.aliens[kind - 1]
            for column in range(ALIEN_COLUMNS):
                x = ALIEN_ORIGIN_X + column * ALIEN_SPACING
                y = ALIEN_ORIGIN_Y + row * ALIEN_SPACING
                aliens.append(Alien(kind, x, y, width, height))
        return aliens

    def move_aliens(self) -> None:
        """March the wave sideways, turning and dropping at the edges."""
        for alien in self.aliens:
            if alien.x + alien.width > self.screen_width - EDGE_MARGIN:
                self.aliens_direction = -abs(self.aliens_direction)
                self.move_down_aliens(ALIEN_DROP)
            if alien.x < EDGE_MARGIN:
                self.aliens_direction = abs(self.aliens_direction)
                self.move_down_aliens(ALIEN_DROP)
            alien.update(self.aliens_direction)

    def move_down_aliens(self, distance: float) -> None:
        """Lower every alien by ``distance`` pixels."""
        for alien in self.aliens:
            alien.y += distance

    def alien_shoot_laser(self) -> None:
        """Let a random alien fire once the cool-down has passed."""
        if self.clock() - self.time_last_alien_fired < ALIEN_LASER_INTERVAL or not self.aliens:
            return
        alien = self.aliens[self.rng.randint(0, len(self.aliens) - 1)]
        self.alien_lasers.append(
            Laser(alien.x + alien.width // 2, alien.y + alien.height, ALIEN_LASER_SPEED)
        )
        self.time_last_alien_fired = self.clock()

    def delete_inactive_lasers(self) -> None:
        """Drop lasers that have hit something or left the field."""
        self.spaceship.lasers[:] = [laser for laser in self.spaceship.lasers if laser.active]
        self.alien_lasers = [laser for laser in self.alien_lasers if laser.active]

    def _hit_obstacles(self, laser: Laser) -> None:
        for obstacle in self.obstacles:
            if obstacle.remove_hits(laser.rect()):
                laser.active = False

    def check_for_collisions(self) -> None:
        """Resolve every hit between lasers, aliens, shields and ships."""
        for laser in self.spaceship.lasers:
            survivors = []
            for alien in self.aliens:
                if alien.rect().collides(laser.rect()):
                    self._explode()
                    self.score += alien.points()
                    self.check_for_high_score()
                    laser.active = False
                else:
                    survivors.append(alien)
            self.aliens = survivors

            self._hit_obstacles(laser)

            if self.mystery_ship.rect().collides(laser.rect()):
                self.mystery_ship.alive = False
                laser.active = False
                self.score += MYSTERY_POINTS
                self.check_for_high_score()
                self._explode()

        for laser in self.alien_lasers:
            if laser.rect().collides(self.spaceship.rect()):
                laser.active = False
                self.lives -= 1
                if self.lives == 0:
                    self.game_over()
            self._hit_obstacles(laser)

        for alien in self.aliens:
            for obstacle in self.obstacles:
                obstacle.remove_hits(alien.rect())
            if alien.rect().collides(self.spaceship.rect()):
                self.game_over()

    def check_for_high_score(self) -> None:
        """Record the current score if it beats the best so far."""
        if self.score > self.highscore:
            self.highscore = self.score
            self.store.save(self.highscore)