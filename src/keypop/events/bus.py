from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float (seconds)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_KEY_PRESS = "key_press"              # payload: symbol=int|str, modifiers=int


# ============================================================================
# BOARD
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"      # payload: bubbles=list[Bubble], reason=str, letter=str|None
EVENT_BOARD_HIDDEN = "board_hidden"        # payload: reason=str
EVENT_BUBBLE_SPAWNED = "bubble_spawned"    # payload: letter=str, x=int, y=int
EVENT_BUBBLE_POPPED = "bubble_popped"      # payload: letter=str


# ============================================================================
# SCORE & CLOCK
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"      # payload: score=int, time_remaining=int, speed_level=int, letter=str, hit=bool
EVENT_CLOCK_TICK = "clock_tick"            # payload: time_remaining=int
EVENT_SPEED_UP = "speed_up"                # payload: previous_level=int, speed_level=int, score=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_START_REQUEST = "game_start_request"    # payload: source=str
EVENT_GAME_STARTED = "game_started"                # payload: score=int, time_remaining=int, speed_level=int
EVENT_GAME_ENDED = "game_ended"                    # payload: final_score=int, reason=str
