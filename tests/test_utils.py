import pytest

from oxirun.utils import FocusDirection


def test_down_moves_forward():
    assert FocusDirection.DOWN.add(0, 3) == 1


def test_down_wraps_to_start():
    assert FocusDirection.DOWN.add(2, 3) == 0


def test_up_moves_back():
    assert FocusDirection.UP.add(2, 3) == 1


def test_up_wraps_to_end():
    assert FocusDirection.UP.add(0, 3) == 2


def test_empty_list_focuses_zero_down():
    assert FocusDirection.DOWN.add(0, 0) == 0


def test_empty_list_focuses_zero_up():
    assert FocusDirection.UP.add(0, 0) == 0


@pytest.mark.parametrize("length", [1, 2, 5, 9])
def test_results_stay_in_range(length):
    for current in range(length):
        assert 0 <= FocusDirection.DOWN.add(current, length) < length
        assert 0 <= FocusDirection.UP.add(current, length) < length


@pytest.mark.parametrize("length", [1, 4, 7])
def test_up_undoes_down(length):
    for current in range(length):
        moved = FocusDirection.DOWN.add(current, length)
        assert FocusDirection.UP.add(moved, length) == current


@pytest.mark.parametrize("length", [3, 6])
def test_full_cycle_returns_to_start(length):
    position = 0
    for _ in range(length):
        position = FocusDirection.DOWN.add(position, length)
    assert position == 0