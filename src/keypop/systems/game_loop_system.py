"""Session state machine: IDLE -> RUNNING -> ENDED.

While running, two timers share one scheduler advanced by EVENT_TICK:

* the clock fires every ``tick_interval`` seconds and costs one unit of time;
* the spawn cycle runs immediately on start and then every
  ``base_spawn_interval / speed_level`` seconds. It is the only place that
  notices the time is up, so remaining time may sit at or below zero for up
  to one spawn interval before the session ends.
"""
from __future__ import annotations

import logging
from typing import Callable

from esper import World

from keypop.components.game_state import GameMode
from keypop.constants import (
    BASE_SPAWN_INTERVAL,
    END_REASON_INTERNAL_ERROR,
    END_REASON_TIME_UP,
    INITIAL_GAME_SPEED,
    INITIAL_GAME_TIME,
    INITIAL_SCORE,
    TICK_INTERVAL,
)
from keypop.errors import RandomSourceFailure
from keypop.events.bus import (
    EVENT_CLOCK_TICK,
    EVENT_GAME_ENDED,
    EVENT_GAME_START_REQUEST,
    EVENT_GAME_STARTED,
    EVENT_SPEED_UP,
    EVENT_TICK,
    EventBus,
)
from keypop.systems.board import BoardSystem
from keypop.utils.game_state import get_game_state, get_score_state, set_game_mode
from keypop.utils.random_sources import PositionSource, RandomLetterSource
from keypop.utils.timers import TimerHandle, TimerScheduler

logger = logging.getLogger(__name__)

GameOverCallback = Callable[[int, str], None]


class GameLoopSystem:
    """Drives the clock and the spawn cycle for one session at a time."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        board_system: BoardSystem,
        *,
        letter_source: RandomLetterSource | None = None,
        position_source: PositionSource | None = None,
        scheduler: TimerScheduler | None = None,
        tick_interval: float = TICK_INTERVAL,
        base_spawn_interval: float = BASE_SPAWN_INTERVAL,
        initial_time: int = INITIAL_GAME_TIME,
        on_game_over: GameOverCallback | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system
        rng = getattr(world, "random", None)
        self.letter_source = letter_source or RandomLetterSource(rng)
        self.position_source = position_source or PositionSource(rng)
        self.scheduler = scheduler or TimerScheduler()
        self.tick_interval = tick_interval
        self.base_spawn_interval = base_spawn_interval
        self.initial_time = initial_time
        self._on_game_over = on_game_over
        self._clock_handle: TimerHandle | None = None
        self._spawn_handle: TimerHandle | None = None
        self.spawn_cycles = 0

        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_GAME_START_REQUEST, self.on_start_request)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_tick(self, sender, **payload) -> None:
        dt = payload.get("dt")
        if dt is None:
            return
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            return
        self.scheduler.advance(dt)

    def on_start_request(self, sender, **payload) -> None:
        self.start()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """Begin a fresh session from IDLE or ENDED; ignored while a session is running."""
        state = get_game_state(self.world)
        score = get_score_state(self.world)
        if state is None or score is None or state.mode == GameMode.RUNNING:
            return False
        self._cancel_timers()
        if len(self.board_system.board):
            self.board_system.clear(reason="new_session")
        score.reset(score=INITIAL_SCORE, time_remaining=self.initial_time, speed_level=INITIAL_GAME_SPEED)
        state.end_reason = None
        state.final_score = None
        self.spawn_cycles = 0
        set_game_mode(self.world, self.event_bus, GameMode.RUNNING)
        logger.info("Game started: time=%d speed=%d", score.time_remaining, score.speed_level)
        self.event_bus.emit(
            EVENT_GAME_STARTED,
            score=score.score,
            time_remaining=score.time_remaining,
            speed_level=score.speed_level,
        )
        self._clock_handle = self.scheduler.call_every(self.tick_interval, self._on_clock)
        self._spawn_cycle()
        return True

    def end(self, reason: str = END_REASON_TIME_UP) -> bool:
        state = get_game_state(self.world)
        score = get_score_state(self.world)
        if state is None or score is None or state.mode != GameMode.RUNNING:
            return False
        self._cancel_timers()
        self.board_system.clear(reason=reason)
        state.final_score = score.score
        state.end_reason = reason
        set_game_mode(self.world, self.event_bus, GameMode.ENDED)
        logger.info("Game is end: score=%d reason=%s", score.score, reason)
        self.event_bus.emit(EVENT_GAME_ENDED, final_score=score.score, reason=reason)
        if self._on_game_over is not None:
            self._on_game_over(score.score, reason)
        return True

    @property
    def clock_handle(self) -> TimerHandle | None:
        return self._clock_handle

    @property
    def spawn_handle(self) -> TimerHandle | None:
        return self._spawn_handle

    # ------------------------------------------------------------------
    # Timer callbacks
    # ------------------------------------------------------------------

    def _on_clock(self) -> None:
        score = get_score_state(self.world)
        if score is None:
            return
        score.tick()
        self.event_bus.emit(EVENT_CLOCK_TICK, time_remaining=score.time_remaining)

    def _spawn_cycle(self) -> None:
        self._spawn_handle = None
        state = get_game_state(self.world)
        score = get_score_state(self.world)
        if state is None or score is None or state.mode != GameMode.RUNNING:
            return
        self.spawn_cycles += 1
        logger.debug(
            "Game status: score=%d time=%d speed=%d",
            score.score,
            score.time_remaining,
            score.speed_level,
        )
        if score.is_expired():
            self.end(END_REASON_TIME_UP)
            return
        try:
            letter = self.letter_source.next()
            position = self.position_source.next(*self.board_system.size)
        except RandomSourceFailure:
            logger.exception("Spawn cycle failed; ending session")
            self.end(END_REASON_INTERNAL_ERROR)
            return
        try:
            self.board_system.add_bubble(letter, position)
            previous_level = score.speed_level
            if score.maybe_speed_up():
                self.event_bus.emit(
                    EVENT_SPEED_UP,
                    previous_level=previous_level,
                    speed_level=score.speed_level,
                    score=score.score,
                )
        except Exception:
            # No next cycle is scheduled yet; end now or the session would never expire.
            logger.exception("Spawn of %s failed; ending session", letter)
            self.end(END_REASON_INTERNAL_ERROR)
            raise
        self._spawn_handle = self.scheduler.call_later(
            score.spawn_interval(self.base_spawn_interval),
            self._spawn_cycle,
        )

    def _cancel_timers(self) -> None:
        for handle in (self._clock_handle, self._spawn_handle):
            if handle is not None:
                handle.cancel()
        self._clock_handle = None
        self._spawn_handle = None
        self.scheduler.cancel_all()
