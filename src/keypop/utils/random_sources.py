from __future__ import annotations

import random
from typing import Tuple

from keypop.constants import LETTERS
from keypop.errors import InvalidBoundsError, RandomSourceFailure


class RandomLetterSource:
    """Draws letters uniformly from a fixed alphabet.

    Letters already on the board are not avoided; repeated draws are expected.
    """

    def __init__(self, rng: random.Random | None = None, alphabet: str = LETTERS) -> None:
        self._rng = rng or random.Random()
        self.alphabet = alphabet

    def next(self) -> str:
        try:
            index = self._rng.randrange(len(self.alphabet))
        except Exception as exc:
            raise RandomSourceFailure("letter generation failed") from exc
        return self.alphabet[index]


class PositionSource:
    """Draws integer board coordinates in ``[0, max_x) x [0, max_y)``."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def next(self, max_x: int, max_y: int) -> Tuple[int, int]:
        if not _positive_int(max_x) or not _positive_int(max_y):
            raise InvalidBoundsError(max_x, max_y)
        try:
            x = self._rng.randrange(max_x)
            y = self._rng.randrange(max_y)
        except Exception as exc:
            raise RandomSourceFailure("position generation failed") from exc
        return x, y


def _positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
