from dataclasses import dataclass
from typing import Tuple

from keypop.constants import BUBBLE_COLOR


@dataclass(slots=True)
class Bubble:
    """A letter shown at a board position.

    Coordinates are board-local with the origin at the top-left corner.
    """
    letter: str
    x: int
    y: int
    color: Tuple[int, int, int] = BUBBLE_COLOR
    visible: bool = True

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y
