from esper import World

from keypop.components.score_state import GameSnapshot
from keypop.constants import HUD_FONT_SIZE, HUD_HEIGHT
from keypop.utils.game_state import get_score_state


class HudRenderer:
    """Score, remaining time and speed level along the top edge of the window."""

    def __init__(self, world: World):
        self.world = world

    def lines(self, snapshot: GameSnapshot) -> list[str]:
        return [
            f"Score: {snapshot.score}",
            f"Time: {max(0, snapshot.time_remaining)}",
            f"Speed: {snapshot.speed_level}",
        ]

    def render(self, arcade, window_width: float, window_height: float) -> None:
        score = get_score_state(self.world)
        if score is None:
            return
        labels = self.lines(score.snapshot())
        slot = window_width / len(labels)
        y = window_height - HUD_HEIGHT / 2
        for index, text in enumerate(labels):
            arcade.draw_text(
                text,
                slot * index + slot / 2,
                y,
                arcade.color.WHITE,
                HUD_FONT_SIZE,
                anchor_x="center",
                anchor_y="center",
            )
