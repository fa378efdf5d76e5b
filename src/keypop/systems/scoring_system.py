import logging

from esper import World

from keypop.components.game_state import GameMode
from keypop.components.score_state import GameStateDelta
from keypop.events.bus import EventBus, EVENT_SCORE_CHANGED
from keypop.systems.board import BoardSystem
from keypop.utils.game_state import current_mode, get_score_state

logger = logging.getLogger(__name__)


class ScoringSystem:
    """Applies the scoring transition to letters forwarded by the InputRouter.

    Subscribe ``on_letter`` to the router. Presses outside a running session
    are ignored so the menu can use the keyboard without costing time.
    """

    def __init__(self, world: World, event_bus: EventBus, board_system: BoardSystem):
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system

    def on_letter(self, letter: str) -> GameStateDelta | None:
        if current_mode(self.world) != GameMode.RUNNING:
            return None
        score = get_score_state(self.world)
        if score is None:
            return None
        delta = score.apply_key_press(letter, self.board_system.has_bubble(letter))
        if delta.remove_letter:
            self.board_system.remove_bubble(letter)
        logger.debug("key %s %s: score=%d time=%d", letter, "hit" if delta.remove_letter else "miss", score.score, score.time_remaining)
        self.event_bus.emit(
            EVENT_SCORE_CHANGED,
            score=score.score,
            time_remaining=score.time_remaining,
            speed_level=score.speed_level,
            letter=letter,
            hit=delta.remove_letter,
        )
        return delta
