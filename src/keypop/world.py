import random

from esper import World
from keypop.components.game_state import GameMode, GameState
from keypop.components.score_state import ScoreState
from keypop.constants import WINDOW_HEIGHT, WINDOW_WIDTH


def create_world(
    initial_mode: GameMode = GameMode.IDLE,
    *,
    viewport: tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT),
    rng: random.Random | None = None,
) -> World:
    """Create the world with the singleton session entity.

    The world holds state only; systems get the event bus themselves. The
    board entity is owned by ``BoardSystem``; ``world.viewport`` records the
    window size the board dimensions are derived from.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "viewport", (int(viewport[0]), int(viewport[1])))

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))
    world.add_component(state_entity, ScoreState())
    return world
