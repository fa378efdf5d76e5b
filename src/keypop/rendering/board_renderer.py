from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from keypop.components.bubble import Bubble
from keypop.constants import BUBBLE_RADIUS, BUBBLE_TEXT_COLOR
from keypop.ui.layout import bubble_screen_position

if TYPE_CHECKING:
    from keypop.systems.render import RenderSystem


class BoardRenderer:
    """Draws the board frame and one circle per visible bubble."""

    def __init__(self, render_system: RenderSystem, radius: int = BUBBLE_RADIUS):
        self._rs = render_system
        self._radius = radius

    def render(self, arcade, bubbles: Sequence[Bubble], left: float, bottom: float, top: float, headless: bool) -> None:
        rs = self._rs
        rs._last_draw_coords = {}
        width, height = rs.board_size
        if not headless:
            arcade.draw_lrbt_rectangle_outline(left, left + width, bottom, top, arcade.color.DIM_GRAY, 1)
        for bubble in bubbles:
            if not bubble.visible:
                continue
            draw_x, draw_y = bubble_screen_position(left, top, bubble.x, bubble.y)
            rs._last_draw_coords[bubble.letter] = (draw_x, draw_y)
            if headless:
                continue
            arcade.draw_circle_filled(draw_x, draw_y, self._radius, bubble.color)
            arcade.draw_text(
                bubble.letter,
                draw_x,
                draw_y,
                BUBBLE_TEXT_COLOR,
                self._radius,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
