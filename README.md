# invaders

A Space Invaders arcade game for the desktop, built on pygame.

Five rows of eleven aliens march across the screen. Each time one of them
reaches an edge, they turn and drop lower. Shoot them down from your ship
before they reach you. Four bunkers give cover. Every laser that hits a bunker
knocks blocks out of it, and aliens that march into a bunker wear it away too.
Now and then a mystery ship flies across the top of the screen and is worth
extra points.

## Installing

```
pip install .
```

This installs pygame as well.

## Playing

```
invaders
```

| Option              | Default          | Meaning                                      |
|---------------------|------------------|----------------------------------------------|
| `--assets DIR`      | `.`              | directory holding `Font/`, `Graphics/` and `Sounds/` |
| `--highscore FILE`  | `highscore.txt`  | file that keeps the best score               |

| Key         | Action                           |
|-------------|----------------------------------|
| Left/Right  | Move the ship                    |
| Space       | Fire (one shot every 0.35 s)     |
| Enter       | Start a new game after game over |
| Escape      | Quit                             |

Closing the window also quits.

### Scoring

| Target                    | Points |
|---------------------------|--------|
| Alien, bottom two rows    | 100    |
| Alien, middle two rows    | 200    |
| Alien, top row            | 300    |
| Mystery ship              | 500    |

You start with three lives. Each hit from an alien laser costs one life. The
game ends when you run out of lives or when an alien touches your ship. After
you clear a wave, the next level begins with faster aliens and new bunkers.

The best score is written to the high-score file as soon as you beat it. It is
read again each time a new game starts.

### Assets

The game needs these files under the assets directory:

- `Font/monogram.ttf`
- `Graphics/spaceship.png`, `Graphics/mystery.png`, `Graphics/alien_1.png`,
  `Graphics/alien_2.png`, `Graphics/alien_3.png`
- `Sounds/music.ogg`, `Sounds/explosion.ogg`, `Sounds/laser.ogg`

None of these files ship with the package. The game will not start if the font,
an image or a sound is missing. If no audio device can be opened, the game runs
without sound.

## Using the pieces

The rules live in `invaders.game` and do not depend on a window, so you can
drive them from code. `Game` takes the screen size, a `SpriteSizes` with the
pixel sizes of the sprites, and, as optional arguments, a `HighScoreStore`, a
clock function, a `random.Random` and callbacks that run on explosions and on
laser shots. Call `handle_input(keys)` and `update(keys)` once per frame with a
set of `Key` values (`Key.LEFT`, `Key.RIGHT`, `Key.SPACE`, `Key.ENTER`). Read
the state of the round from `lives`, `score`, `highscore`, `level` and `run`.

```python
import random

from invaders.game import Game, HighScoreStore, Key, SpriteSizes

sizes = SpriteSizes(
    aliens=((40, 30), (40, 30), (40, 30)),
    spaceship=(60, 40),
    mystery_ship=(80, 35),
)
game = Game(800, 800, sizes, HighScoreStore("scores.txt"), rng=random.Random(1))
game.handle_input({Key.SPACE})
game.update({Key.SPACE})
print(game.score, game.lives, game.level)
```

`HighScoreStore.load()` returns 0 when the file is missing or holds no number.
Both `load()` and `save(score)` report a failure on stderr and do not raise.

`invaders.app.format_with_leading_zeros` pads the numbers shown on screen. It
raises `ValueError` when the number does not fit in the width:

```python
from invaders.app import format_with_leading_zeros

format_with_leading_zeros(42, 5)   # "00042"
```

The other modules hold the pieces of the game: `invaders.spaceship.Spaceship`,
`invaders.alien.Alien`, `invaders.mysteryship.MysteryShip`,
`invaders.obstacle.Obstacle`, `invaders.laser.Laser`, and
`invaders.shapes.Rect` and `invaders.shapes.Block` for hit boxes.

## Running the tests

```
pip install .[test]
pytest
```