from invaders.shapes import Rect
from invaders.spaceship import Spaceship


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def make_ship(clock=None, on_fire=None):
    return Spaceship(800, 800, 60, 30, clock or FakeClock(1.0), on_fire)


def test_starts_centred_above_bottom():
    ship = make_ship()
    assert ship.x == (800 - 60) / 2
    assert ship.y == 800 - 30 - 100
    assert ship.lasers == []


def test_move_left_and_right_are_symmetric():
    ship = make_ship()
    start = ship.x
    ship.move_left()
    assert ship.x < start
    ship.move_right()
    assert ship.x == start


def test_move_left_clamps_to_margin():
    ship = make_ship()
    for _ in range(200):
        ship.move_left()
    assert ship.x == 25


def test_move_right_clamps_to_margin():
    ship = make_ship()
    for _ in range(200):
        ship.move_right()
    assert ship.x == 800 - 60 - 25


def test_fire_laser_respects_interval():
    clock = FakeClock(1.0)
    fired = []
    ship = make_ship(clock, lambda: fired.append(clock.now))
    assert ship.fire_laser() is True
    clock.now = 1.2
    assert ship.fire_laser() is False
    clock.now = 1.35
    assert ship.fire_laser() is True
    assert len(ship.lasers) == 2
    assert fired == [1.0, 1.35]


def test_first_shot_needs_cooldown_from_zero():
    clock = FakeClock(0.1)
    ship = make_ship(clock)
    assert ship.fire_laser() is False
    assert ship.lasers == []


def test_laser_starts_at_ship_centre_and_goes_up():
    ship = make_ship()
    ship.fire_laser()
    laser = ship.lasers[0]
    assert laser.x == ship.x + 60 // 2 - 2
    assert laser.y == ship.y
    before = laser.y
    laser.update(800)
    assert laser.y < before


def test_rect_matches_position_and_size():
    ship = make_ship()
    assert ship.rect() == Rect(ship.x, ship.y, 60, 30)


def test_reset_recentres_and_clears_lasers():
    ship = make_ship()
    start = (ship.x, ship.y)
    ship.fire_laser()
    for _ in range(10):
        ship.move_left()
    ship.reset()
    assert (ship.x, ship.y) == start
    assert ship.lasers == []