import pytest

from arraylab.extremes import min_max


def test_source_example():
    assert min_max([5, 8, 3, 9, 6, 2, 10, 7, -1, 4]) == (-1, 10)


@pytest.mark.parametrize(
    "values",
    [
        [1],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [3, 3, 3],
        [0.5, -2.5, 7.25, 1.0],
    ],
)
def test_agrees_with_builtins(values):
    assert min_max(values) == (min(values), max(values))


def test_accepts_iterator():
    values = [9, -4, 12, 0]
    assert min_max(iter(values)) == (min(values), max(values))


def test_empty_raises():
    with pytest.raises(ValueError):
        min_max([])