"""KeyPop window: wires the ECS world, event bus and systems to arcade."""
import logging

from arcade import Window, run, set_background_color, color
from keypop.world import create_world
from keypop.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from keypop.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from keypop.menu.factory import spawn_start_menu
from keypop.menu.input_system import MenuInputSystem
from keypop.menu.render_system import MenuRenderSystem
from keypop.systems.board import BoardSystem
from keypop.systems.game_loop_system import GameLoopSystem
from keypop.systems.input import InputRouter
from keypop.systems.render import RenderSystem
from keypop.systems.scoring_system import ScoringSystem


class KeyPopWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        # Board dimensions come from the viewport once, here; later resizes only recenter the board.
        self.world = create_world(viewport=(self.width, self.height))

        # Board and session systems
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.game_loop_system = GameLoopSystem(self.world, self.event_bus, self.board_system)
        self.scoring_system = ScoringSystem(self.world, self.event_bus, self.board_system)

        # Input systems
        self.input_router = InputRouter(self.event_bus)
        self.input_router.subscribe(self.scoring_system.on_letter)

        # Menu systems
        spawn_start_menu(self.world, self.width, self.height)
        self.menu_input_system = MenuInputSystem(
            self.world,
            self.event_bus,
            menu_size_provider=lambda: (self.width, self.height),
        )
        self.menu_render_system = MenuRenderSystem(self.world, self)

        # Rendering
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.board_system)

        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()
        self.menu_render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    window = KeyPopWindow()
    run()
