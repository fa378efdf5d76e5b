import pytest

from keypop.components.game_state import GameMode
from keypop.events.bus import EVENT_GAME_START_REQUEST, EVENT_KEY_PRESS, EVENT_MOUSE_PRESS
from keypop.menu.components import MenuAction, MenuBanner, MenuButton, MenuTag
from keypop.menu.factory import clear_menu, spawn_game_over_menu, spawn_start_menu
from keypop.menu.input_system import MenuInputSystem
from keypop.utils.game_state import current_mode, get_score_state


@pytest.fixture
def menu(session):
    spawn_start_menu(session.world, 800, 600)
    return MenuInputSystem(session.world, session.bus)


def _buttons(world):
    return [button for _, button in world.get_component(MenuButton)]


def test_start_menu_has_centered_start_button(world):
    spawn_start_menu(world, 800, 600)
    buttons = _buttons(world)
    assert len(buttons) == 1
    assert buttons[0].action == MenuAction.START
    assert (buttons[0].x, buttons[0].y) == (400, 300)


def test_click_on_start_button_starts_session(session, menu, recorder):
    requests = recorder(EVENT_GAME_START_REQUEST)
    session.bus.emit(EVENT_MOUSE_PRESS, x=400, y=300, button=1)

    assert requests.received == [{"source": "click", "action": "start"}]
    assert current_mode(session.world) == GameMode.RUNNING
    # The button disappears once clicked.
    assert not list(session.world.get_component(MenuTag))


def test_click_outside_button_does_nothing(session, menu, recorder):
    requests = recorder(EVENT_GAME_START_REQUEST)
    session.bus.emit(EVENT_MOUSE_PRESS, x=10, y=10, button=1)
    assert requests.received == []
    assert current_mode(session.world) == GameMode.IDLE
    assert _buttons(session.world)


def test_enter_key_starts_session(session, menu):
    session.bus.emit(EVENT_KEY_PRESS, symbol=65293, modifiers=0)
    assert current_mode(session.world) == GameMode.RUNNING


def test_disabled_button_ignored(session, menu):
    for button in _buttons(session.world):
        button.enabled = False
    session.bus.emit(EVENT_MOUSE_PRESS, x=400, y=300, button=1)
    session.bus.emit(EVENT_KEY_PRESS, symbol=65293, modifiers=0)
    assert current_mode(session.world) == GameMode.IDLE


def test_game_over_menu_shows_score_and_restarts(session, menu, advance):
    session.bus.emit(EVENT_MOUSE_PRESS, x=400, y=300, button=1)
    get_score_state(session.world).score = 7
    advance(20.0)
    assert current_mode(session.world) == GameMode.ENDED

    banners = [banner.text for _, banner in session.world.get_component(MenuBanner)]
    assert "Score: 7" in banners
    buttons = _buttons(session.world)
    assert [b.action for b in buttons] == [MenuAction.RESTART]

    session.bus.emit(EVENT_MOUSE_PRESS, x=buttons[0].x, y=buttons[0].y, button=1)
    score = get_score_state(session.world)
    assert current_mode(session.world) == GameMode.RUNNING
    assert (score.score, score.time_remaining) == (0, 20)


def test_game_over_menu_replaces_existing_menu(world):
    spawn_start_menu(world, 800, 600)
    spawn_game_over_menu(world, 800, 600, final_score=3)
    assert [b.action for b in _buttons(world)] == [MenuAction.RESTART]
    clear_menu(world)
    assert not list(world.get_component(MenuTag))
