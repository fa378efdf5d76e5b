from __future__ import annotations

from dataclasses import dataclass

from keypop.constants import (
    BASE_SPAWN_INTERVAL,
    INITIAL_GAME_SPEED,
    INITIAL_GAME_TIME,
    INITIAL_SCORE,
    SPEED_UP_SCORE_SCALE,
)


@dataclass(frozen=True, slots=True)
class GameStateDelta:
    """Outcome of one key press: how score and time moved and whether to pop the bubble."""
    score_delta: int
    time_delta: int
    remove_letter: bool


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only view consumed by score and timer displays."""
    score: int
    time_remaining: int
    speed_level: int


@dataclass(slots=True)
class ScoreState:
    """Score, remaining time and speed level of one play session.

    Scoring never inspects the board: callers pass in whether the pressed
    letter is on the board and act on the returned delta themselves.
    """
    score: int = INITIAL_SCORE
    time_remaining: int = INITIAL_GAME_TIME
    speed_level: int = INITIAL_GAME_SPEED
    speed_up_scale: int = SPEED_UP_SCORE_SCALE

    def apply_key_press(self, letter: str, board_has_letter: bool) -> GameStateDelta:
        if board_has_letter:
            delta = GameStateDelta(score_delta=1, time_delta=1, remove_letter=True)
        else:
            delta = GameStateDelta(score_delta=0, time_delta=-1, remove_letter=False)
        self.score += delta.score_delta
        self.time_remaining += delta.time_delta
        return delta

    def tick(self) -> None:
        self.time_remaining -= 1

    def maybe_speed_up(self) -> bool:
        if self.score > self.speed_up_scale * self.speed_level:
            self.speed_level += 1
            return True
        return False

    def spawn_interval(self, base: float = BASE_SPAWN_INTERVAL) -> float:
        return base / self.speed_level

    def is_expired(self) -> bool:
        return self.time_remaining <= 0

    def reset(
        self,
        *,
        score: int = INITIAL_SCORE,
        time_remaining: int = INITIAL_GAME_TIME,
        speed_level: int = INITIAL_GAME_SPEED,
    ) -> None:
        self.score = max(0, int(score))
        self.time_remaining = int(time_remaining)
        self.speed_level = max(1, int(speed_level))

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            score=self.score,
            time_remaining=self.time_remaining,
            speed_level=self.speed_level,
        )
