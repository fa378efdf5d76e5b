import random

import pytest

from keypop.constants import LETTERS
from keypop.errors import InvalidBoundsError, RandomSourceFailure
from keypop.utils.random_sources import PositionSource, RandomLetterSource


class _BrokenRandom(random.Random):
    def randrange(self, *args, **kwargs):
        raise OSError("entropy pool unavailable")


def test_letters_come_from_alphabet():
    source = RandomLetterSource(random.Random(7))
    letters = [source.next() for _ in range(500)]
    assert set(letters) <= set(LETTERS)
    # 500 draws over 26 letters cover most of the alphabet.
    assert len(set(letters)) > 20


def test_letter_source_repeats_letters():
    source = RandomLetterSource(random.Random(3))
    letters = [source.next() for _ in range(60)]
    assert len(letters) > len(set(letters))


def test_letter_source_wraps_rng_failure():
    source = RandomLetterSource(_BrokenRandom())
    with pytest.raises(RandomSourceFailure):
        source.next()


def test_positions_stay_inside_bounds():
    source = PositionSource(random.Random(11))
    for _ in range(300):
        x, y = source.next(7, 3)
        assert 0 <= x < 7
        assert 0 <= y < 3


def test_position_source_single_cell():
    assert PositionSource(random.Random(0)).next(1, 1) == (0, 0)


@pytest.mark.parametrize("bounds", [(0, 10), (10, 0), (-5, 10), (10, -1)])
def test_position_source_rejects_non_positive_bounds(bounds):
    with pytest.raises(InvalidBoundsError):
        PositionSource(random.Random(0)).next(*bounds)


def test_position_source_wraps_rng_failure():
    with pytest.raises(RandomSourceFailure):
        PositionSource(_BrokenRandom()).next(10, 10)
