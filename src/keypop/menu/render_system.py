"""Rendering system responsible for drawing the menus."""
import arcade
from esper import World
from keypop.components.game_state import GameMode
from keypop.menu.components import MenuBanner, MenuButton
from keypop.utils.game_state import current_mode


class MenuRenderSystem:
    """Renders menu entities while no session is running."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        if current_mode(self.world) not in (GameMode.IDLE, GameMode.ENDED):
            return

        for _, banner in self.world.get_component(MenuBanner):
            arcade.draw_text(
                banner.text,
                banner.x,
                banner.y,
                arcade.color.WHITE,
                banner.font_size,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

        for _, button in self.world.get_component(MenuButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            fill_color = arcade.color.DARK_SLATE_BLUE if button.enabled else arcade.color.GRAY_BLUE
            outline_color = arcade.color.WHITE if button.enabled else arcade.color.SILVER
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
            arcade.draw_lbwh_rectangle_outline(
                left,
                bottom,
                button.width,
                button.height,
                outline_color,
                border_width=2,
            )
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                outline_color,
                20,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
