import pytest

from invaders.alien import Alien
from invaders.shapes import Rect


def test_update_moves_horizontally():
    alien = Alien(1, 75, 110, 44, 32)
    alien.update(1)
    alien.update(1.25)
    assert alien.x == 77.25
    assert alien.y == 110


def test_update_negative_direction():
    alien = Alien(2, 75, 110, 44, 32)
    alien.update(-1)
    assert alien.x == 74


def test_rect_matches_position_and_size():
    alien = Alien(3, 75, 110, 44, 32)
    assert alien.rect() == Rect(75, 110, 44, 32)


@pytest.mark.parametrize("kind, points", [(1, 100), (2, 200), (3, 300)])
def test_points_by_kind(kind, points):
    assert Alien(kind, 0, 0, 10, 10).points() == points


@pytest.mark.parametrize("kind", [0, 4, -1])
def test_invalid_kind_raises(kind):
    with pytest.raises(ValueError):
        Alien(kind, 0, 0, 10, 10)