from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from keypop.components.bubble import Bubble
from keypop.constants import LETTERS
from keypop.errors import InvalidBoundsError


@dataclass(slots=True)
class BoardState:
    """Active bubbles keyed by letter.

    Dimensions are fixed when the board is created. A letter maps to at most
    one bubble; adding a letter that is already present replaces the old bubble.
    Letters outside the alphabet and positions off the board raise ValueError.
    Not safe for concurrent mutation.
    """
    width: int
    height: int
    visible: bool = False
    _bubbles: Dict[str, Bubble] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if not _positive_int(self.width) or not _positive_int(self.height):
            raise InvalidBoundsError(self.width, self.height)

    def add_bubble(self, letter: str, position: Tuple[int, int]) -> Bubble:
        if not isinstance(letter, str) or len(letter) != 1 or letter not in LETTERS:
            raise ValueError(f"bubble letter must be one of {LETTERS}, got {letter!r}")
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"bubble position {position!r} is outside the {self.width}x{self.height} board")
        previous = self._bubbles.get(letter)
        if previous is not None:
            previous.visible = False
        bubble = Bubble(letter=letter, x=x, y=y)
        self._bubbles[letter] = bubble
        self.visible = True
        return bubble

    def remove_bubble(self, letter: str) -> Bubble | None:
        bubble = self._bubbles.pop(letter, None)
        if bubble is None:
            return None
        bubble.visible = False
        return bubble

    def has_bubble(self, letter: str) -> bool:
        return letter in self._bubbles

    def get_bubble(self, letter: str) -> Bubble | None:
        return self._bubbles.get(letter)

    def clear(self) -> None:
        for bubble in self._bubbles.values():
            bubble.visible = False
        self._bubbles.clear()
        self.visible = False

    def bubbles(self) -> List[Bubble]:
        return list(self._bubbles.values())

    def letters(self) -> Set[str]:
        return set(self._bubbles)

    def __len__(self) -> int:
        return len(self._bubbles)


def _positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
