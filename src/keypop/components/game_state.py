"""Game state resource describing the active session phase."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GameMode(Enum):
    """Session phases; IDLE waits for the start signal, ENDED is terminal for a session."""
    IDLE = auto()
    RUNNING = auto()
    ENDED = auto()


@dataclass
class GameState:
    """Singleton component storing the current mode and the last session's outcome."""
    mode: GameMode = GameMode.IDLE
    end_reason: Optional[str] = None
    final_score: Optional[int] = None
