from invaders.mysteryship import MysteryShip


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


def test_starts_dead_with_empty_rect():
    ship = MysteryShip(800, 60, 28, FixedRng(0))
    assert ship.alive is False
    rect = ship.rect()
    assert (rect.width, rect.height) == (0.0, 0.0)


def test_spawn_left_side_moves_right():
    rng = FixedRng(0)
    ship = MysteryShip(800, 60, 28, rng)
    ship.spawn()
    assert rng.calls == [(0, 1)]
    assert ship.alive is True
    assert ship.x == 25
    assert ship.y == 90
    start = ship.x
    ship.update()
    assert ship.x > start
    assert ship.alive is True


def test_spawn_right_side_moves_left():
    ship = MysteryShip(800, 60, 28, FixedRng(1))
    ship.spawn()
    assert ship.x == 800 - 60 - 25
    start = ship.x
    ship.update()
    assert ship.x < start


def test_alive_rect_has_ship_size():
    ship = MysteryShip(800, 60, 28, FixedRng(0))
    ship.spawn()
    rect = ship.rect()
    assert (rect.x, rect.y, rect.width, rect.height) == (25, 90, 60, 28)


def test_dies_after_crossing_screen():
    ship = MysteryShip(800, 60, 28, FixedRng(0))
    ship.spawn()
    steps = 0
    while ship.alive:
        ship.update()
        steps += 1
        assert steps < 1000
    assert ship.x > 800 - 60 - 25


def test_right_spawn_dies_at_left_edge():
    ship = MysteryShip(800, 60, 28, FixedRng(1))
    ship.spawn()
    while ship.alive:
        ship.update()
    assert ship.x < 25


def test_update_when_dead_does_nothing():
    ship = MysteryShip(800, 60, 28, FixedRng(0))
    before = ship.x
    ship.update()
    assert ship.x == before