from typing import Dict, List, Sequence, Tuple

from esper import World

from keypop.components.bubble import Bubble
from keypop.components.game_state import GameMode
from keypop.events.bus import EventBus, EVENT_BOARD_CHANGED, EVENT_BOARD_HIDDEN, EVENT_GAME_STARTED
from keypop.rendering.board_renderer import BoardRenderer
from keypop.rendering.hud_renderer import HudRenderer
from keypop.systems.board import BoardSystem
from keypop.ui.layout import compute_board_geometry
from keypop.utils.game_state import current_mode


class RenderSystem:
    """Board renderer driven by board events, plus the in-game HUD.

    ``render`` and ``hide`` are called for every board mutation; ``process``
    draws the cached state once per frame.
    """

    def __init__(self, world: World, event_bus: EventBus, window, board_system: BoardSystem):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.board_system = board_system
        self.board_visible = False
        self._bubbles: List[Bubble] = []
        self._last_draw_coords: Dict[str, Tuple[float, float]] = {}
        self._board_renderer = BoardRenderer(self)
        self._hud_renderer = HudRenderer(self.world)
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)
        self.event_bus.subscribe(EVENT_BOARD_HIDDEN, self.on_board_hidden)
        self.event_bus.subscribe(EVENT_GAME_STARTED, self.on_game_started)

    @property
    def board_size(self) -> Tuple[int, int]:
        return self.board_system.size

    @property
    def bubbles(self) -> List[Bubble]:
        return list(self._bubbles)

    def render(self, bubbles: Sequence[Bubble]) -> None:
        self._bubbles = list(bubbles)
        self.board_visible = True

    def hide(self) -> None:
        self._bubbles = []
        self._last_draw_coords = {}
        self.board_visible = False

    def on_board_changed(self, sender, **kwargs):
        bubbles = kwargs.get('bubbles')
        if bubbles is None:
            return
        self.render(bubbles)

    def on_board_hidden(self, sender, **kwargs):
        self.hide()

    def on_game_started(self, sender, **kwargs):
        # Board frame shows as soon as a session runs, before the first bubble.
        self.board_visible = True

    def get_draw_position(self, letter: str):
        return self._last_draw_coords.get(letter)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        if current_mode(self.world) != GameMode.RUNNING:
            return
        width, height = self.board_size
        left, bottom, top = compute_board_geometry(self.window.width, self.window.height, width, height)
        if self.board_visible:
            self._board_renderer.render(arcade, self._bubbles, left, bottom, top, headless)
        if not headless:
            self._hud_renderer.render(arcade, self.window.width, self.window.height)
