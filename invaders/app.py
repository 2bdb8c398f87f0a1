"""The windowed game: drawing, sound and the main loop."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from invaders.game import Game, HighScoreStore, Key, SpriteSizes
from invaders.laser import LASER_HEIGHT, LASER_WIDTH
from invaders.shapes import BLOCK_SIZE

GREY = (29, 29, 27)
YELLOW = (243, 216, 63)
OFFSET = 50
WINDOW_WIDTH = 750
WINDOW_HEIGHT = 700
FPS = 60
FONT_SIZE = 34

_KEYMAP = {
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.SPACE: pygame.K_SPACE,
    Key.ENTER: pygame.K_RETURN,
}


def format_with_leading_zeros(number: int, width: int) -> str:
    """Pad ``number`` with zeros on the left to ``width`` characters."""
    text = str(number)
    if len(text) > width:
        raise ValueError(f"{number} does not fit in {width} characters")
    return "0" * (width - len(text)) + text


class _Sounds:
    def __init__(self, assets: Path) -> None:
        self.explosion = None
        self.laser = None
        try:
            pygame.mixer.init()
        except pygame.error:
            return
        sounds = assets / "Sounds"
        pygame.mixer.music.load(str(sounds / "music.ogg"))
        pygame.mixer.music.play(-1)
        self.explosion = pygame.mixer.Sound(str(sounds / "explosion.ogg"))
        self.laser = pygame.mixer.Sound(str(sounds / "laser.ogg"))

    def play_explosion(self) -> None:
        if self.explosion is not None:
            self.explosion.play()

    def play_laser(self) -> None:
        if self.laser is not None:
            self.laser.play()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="invaders", description="Play Space Invaders.")
    parser.add_argument("--assets", default=".", help="directory holding Font/, Graphics/ and Sounds/")
    parser.add_argument("--highscore", default="highscore.txt", help="file that keeps the best score")
    return parser.parse_args(argv)


def _pressed_keys() -> frozenset[Key]:
    pressed = pygame.key.get_pressed()
    return frozenset(key for key, code in _KEYMAP.items() if pressed[code])


def _text(screen: pygame.Surface, font: pygame.font.Font, text: str, pos: tuple[int, int]) -> None:
    screen.blit(font.render(text, True, YELLOW), pos)


def _draw_game(screen: pygame.Surface, game: Game, images: dict[str, pygame.Surface]) -> None:
    ship = game.spaceship
    screen.blit(images["spaceship"], (ship.x, ship.y))
    for laser in (*ship.lasers, *game.alien_lasers):
        if laser.active:
            pygame.draw.rect(screen, YELLOW, (laser.x, laser.y, LASER_WIDTH, LASER_HEIGHT))
    for obstacle in game.obstacles:
        for block in obstacle.blocks:
            pygame.draw.rect(screen, YELLOW, (block.x, block.y, BLOCK_SIZE, BLOCK_SIZE))
    for alien in game.aliens:
        screen.blit(images[f"alien_{alien.kind}"], (alien.x, alien.y))
    mystery = game.mystery_ship
    if mystery.alive:
        screen.blit(images["mystery"], (mystery.x, mystery.y))


def _draw_frame(
    screen: pygame.Surface,
    font: pygame.font.Font,
    game: Game,
    images: dict[str, pygame.Surface],
) -> None:
    screen.fill(GREY)
    pygame.draw.rect(screen, YELLOW, (10, 10, 780, 780), width=2, border_radius=int(0.18 * 780 / 2))
    pygame.draw.line(screen, YELLOW, (25, 730), (775, 730), 3)
    if game.run:
        _text(screen, font, "LEVEL", (570, 740))
        _text(screen, font, format_with_leading_zeros(game.level, 2), (670, 740))
    else:
        _text(screen, font, "GAME OVER", (570, 740))
    for life in range(game.lives):
        screen.blit(images["spaceship"], (50 + 50 * life, 745))
    _text(screen, font, "SCORE", (50, 15))
    _text(screen, font, format_with_leading_zeros(game.score, 5), (50, 40))
    _text(screen, font, "HIGH SCORE", (570, 15))
    _text(screen, font, format_with_leading_zeros(game.highscore, 5), (655, 40))
    _draw_game(screen, game, images)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parse_args(argv)
    assets = Path(args.assets)
    pygame.init()
    try:
        size = (WINDOW_WIDTH + OFFSET, WINDOW_HEIGHT + 2 * OFFSET)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("Space Invaders")
        sounds = _Sounds(assets)
        font = pygame.font.Font(str(assets / "Font" / "monogram.ttf"), FONT_SIZE)
        graphics = assets / "Graphics"
        images = {
            name: pygame.image.load(str(graphics / f"{name}.png")).convert_alpha()
            for name in ("spaceship", "mystery", "alien_1", "alien_2", "alien_3")
        }
        sizes = SpriteSizes(
            aliens=tuple(images[f"alien_{kind}"].get_size() for kind in (1, 2, 3)),
            spaceship=images["spaceship"].get_size(),
            mystery_ship=images["mystery"].get_size(),
        )
        game = Game(
            size[0],
            size[1],
            sizes,
            HighScoreStore(args.highscore),
            on_explosion=sounds.play_explosion,
            on_laser=sounds.play_laser,
        )
        ticker = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    return 0
            keys = _pressed_keys()
            game.handle_input(keys)
            game.update(keys)
            _draw_frame(screen, font, game, images)
            pygame.display.flip()
            ticker.tick(FPS)
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())