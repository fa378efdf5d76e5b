"""Factory helpers for creating menu entities."""
from esper import World

from keypop.constants import WINDOW_TITLE
from keypop.menu.components import MenuAction, MenuBanner, MenuButton, MenuTag


def spawn_start_menu(world: World, width: float, height: float) -> int:
    """Create the title and the centered start button; returns the button entity."""
    center_x = width / 2
    center_y = height / 2
    world.create_entity(MenuBanner(text=WINDOW_TITLE, x=center_x, y=center_y + 80.0, font_size=36), MenuTag())
    return world.create_entity(
        MenuButton(label="Start", action=MenuAction.START, x=center_x, y=center_y),
        MenuTag(),
    )


def spawn_game_over_menu(world: World, width: float, height: float, final_score: int) -> int:
    """Create the final score banner and a replay button; returns the button entity."""
    clear_menu(world)
    center_x = width / 2
    center_y = height / 2
    world.create_entity(MenuBanner(text="Game Over", x=center_x, y=center_y + 110.0, font_size=36), MenuTag())
    world.create_entity(MenuBanner(text=f"Score: {final_score}", x=center_x, y=center_y + 60.0), MenuTag())
    return world.create_entity(
        MenuButton(label="Play Again", action=MenuAction.RESTART, x=center_x, y=center_y - 20.0),
        MenuTag(),
    )


def clear_menu(world: World) -> None:
    """Remove all entities that are part of the menu UI."""
    for ent in [ent for ent, _ in world.get_component(MenuTag)]:
        world.delete_entity(ent, immediate=True)
