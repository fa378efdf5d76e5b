"""Input handling for the start and game-over menus."""
from typing import Callable, Optional

from esper import World

from keypop.components.game_state import GameMode
from keypop.events.bus import (
    EVENT_GAME_ENDED,
    EVENT_GAME_START_REQUEST,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EventBus,
)
from keypop.menu.components import MenuAction, MenuButton
from keypop.menu.factory import clear_menu, spawn_game_over_menu
from keypop.utils.game_state import current_mode

_MENU_MODES = (GameMode.IDLE, GameMode.ENDED)
# arcade.key.ENTER == 65293 and arcade.key.NUM_ENTER == 65421; raw values keep this module free of arcade.
_ENTER_KEYS = (65293, 65421, 13)


class MenuInputSystem:
    """Turns clicks on menu buttons (or Enter) into the session start signal."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        menu_size_provider: Optional[Callable[[], tuple[float, float]]] = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._menu_size_provider = menu_size_provider
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)
        event_bus.subscribe(EVENT_GAME_ENDED, self.on_game_ended)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return
        self.handle_mouse_press(float(x), float(y))

    def on_key_press(self, sender, **payload) -> None:
        symbol = payload.get("symbol")
        if symbol in _ENTER_KEYS:
            self.activate_default()

    def on_game_ended(self, sender, **payload) -> None:
        final_score = payload.get("final_score", 0)
        width, height = self._menu_size()
        spawn_game_over_menu(self.world, width, height, int(final_score or 0))

    def handle_mouse_press(self, x: float, y: float) -> bool:
        """Activate the button under the cursor, if any."""
        if current_mode(self.world) not in _MENU_MODES:
            return False
        for _, menu_button in self.world.get_component(MenuButton):
            if not menu_button.enabled:
                continue
            if self._point_inside_button(x, y, menu_button):
                self._activate_action(menu_button.action, source="click")
                return True
        return False

    def activate_default(self) -> bool:
        """Keyboard activation of the first enabled button."""
        if current_mode(self.world) not in _MENU_MODES:
            return False
        for _, menu_button in self.world.get_component(MenuButton):
            if menu_button.enabled:
                self._activate_action(menu_button.action, source="keyboard")
                return True
        return False

    def _activate_action(self, action: MenuAction, *, source: str) -> None:
        # By default, buttons disappear once activated.
        clear_menu(self.world)
        self.event_bus.emit(EVENT_GAME_START_REQUEST, source=source, action=action.name.lower())

    def _menu_size(self) -> tuple[float, float]:
        if self._menu_size_provider is not None:
            return self._menu_size_provider()
        return getattr(self.world, "viewport", (800.0, 600.0))

    @staticmethod
    def _point_inside_button(x: float, y: float, button: MenuButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (
            button.x - half_w <= x <= button.x + half_w
            and button.y - half_h <= y <= button.y + half_h
        )
