import pytest

from invaders.app import format_with_leading_zeros


def test_pads_level():
    assert format_with_leading_zeros(7, 2) == "07"


def test_pads_score():
    assert format_with_leading_zeros(123, 5) == "00123"


@pytest.mark.parametrize("number,width", [(0, 5), (9, 2), (45, 2), (99999, 5), (300, 5), (12, 8)])
def test_result_has_width_and_value(number, width):
    text = format_with_leading_zeros(number, width)
    assert len(text) == width
    assert int(text) == number
    assert text.endswith(str(number))
    assert set(text[: width - len(str(number))]) <= {"0"}


def test_exact_width_unchanged():
    assert format_with_leading_zeros(12345, 5) == str(12345)


@pytest.mark.parametrize("number,width", [(100000, 5), (123, 2)])
def test_too_wide_raises(number, width):
    with pytest.raises(ValueError):
        format_with_leading_zeros(number, width)