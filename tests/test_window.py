import pytest

from blockmine.errors import InvalidInitialWindow
from blockmine.window import Window


def test_seed_order_preserved():
    window = Window([35, 20, 15, 25, 47], 5)
    assert list(window) == [35, 20, 15, 25, 47]
    assert window.oldest() == 35
    assert window.newest() == 47
    assert len(window) == 5


def test_evict_oldest_and_push_keeps_length():
    window = Window([4, 4, 2, 2], 4)
    assert window.evict_oldest_and_push(8) == 4
    assert window.snapshot() == (4, 2, 2, 8)
    assert window.evict_oldest_and_push(4) == 4
    assert window.snapshot() == (2, 2, 8, 4)
    assert len(window) == 4


def test_newer_excludes_oldest():
    window = Window([1, 2, 3], 3)
    assert list(window.newer()) == [2, 3]
    window.evict_oldest_and_push(9)
    assert list(window.newer()) == [3, 9]


@pytest.mark.parametrize(
    "seed, size",
    [
        ([1, 2, 3, 4], 5),
        ([1, 2, 3, 4, 5, 6], 5),
        ([1], 1),
        ([], 1),
        ([1, 2], 0),
    ],
)
def test_invalid_initial_window(seed, size):
    with pytest.raises(InvalidInitialWindow):
        Window(seed, size)
