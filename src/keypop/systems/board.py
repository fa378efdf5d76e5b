from typing import List, Optional, Tuple

from esper import World

from keypop.components.board import BoardState
from keypop.components.bubble import Bubble
from keypop.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_HIDDEN,
    EVENT_BUBBLE_POPPED,
    EVENT_BUBBLE_SPAWNED,
)
from keypop.ui.layout import board_dimensions


class BoardSystem:
    """Owns the board entity and announces every board mutation on the bus.

    Renderers never read the board directly: they react to
    EVENT_BOARD_CHANGED (full bubble list) and EVENT_BOARD_HIDDEN.
    """

    def __init__(self, world: World, event_bus: EventBus, width: Optional[int] = None, height: Optional[int] = None):
        self.world = world
        self.event_bus = event_bus
        if width is None or height is None:
            width, height = getattr(world, "viewport")
        board_width, board_height = board_dimensions(width, height)
        # Create a single board entity with BoardState component; raises InvalidBoundsError on a tiny viewport.
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, BoardState(width=board_width, height=board_height))

    @property
    def board(self) -> BoardState:
        return self.world.component_for_entity(self.board_entity, BoardState)

    @property
    def size(self) -> Tuple[int, int]:
        board = self.board
        return board.width, board.height

    def add_bubble(self, letter: str, position: Tuple[int, int]) -> Bubble:
        bubble = self.board.add_bubble(letter, position)
        self.event_bus.emit(EVENT_BUBBLE_SPAWNED, letter=letter, x=bubble.x, y=bubble.y)
        self._announce(reason="spawn", letter=letter)
        return bubble

    def remove_bubble(self, letter: str) -> Optional[Bubble]:
        bubble = self.board.remove_bubble(letter)
        if bubble is None:
            return None
        self.event_bus.emit(EVENT_BUBBLE_POPPED, letter=letter)
        self._announce(reason="pop", letter=letter)
        return bubble

    def has_bubble(self, letter: str) -> bool:
        return self.board.has_bubble(letter)

    def bubbles(self) -> List[Bubble]:
        return self.board.bubbles()

    def clear(self, reason: str = "clear") -> None:
        self.board.clear()
        self.event_bus.emit(EVENT_BOARD_HIDDEN, reason=reason)

    def _announce(self, *, reason: str, letter: Optional[str]) -> None:
        self.event_bus.emit(EVENT_BOARD_CHANGED, bubbles=self.board.bubbles(), reason=reason, letter=letter)
