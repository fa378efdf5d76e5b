import random
import sys, os
from types import SimpleNamespace

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from keypop.events.bus import EVENT_TICK, EventBus
from keypop.systems.board import BoardSystem
from keypop.systems.game_loop_system import GameLoopSystem
from keypop.systems.input import InputRouter
from keypop.systems.scoring_system import ScoringSystem
from keypop.world import create_world


class EventRecorder:
    """Collects payloads emitted for one event name."""

    def __init__(self, bus: EventBus, name: str):
        self.received = []
        bus.subscribe(name, self.on_event)

    def on_event(self, sender, **payload):
        self.received.append(payload)

    def __len__(self):
        return len(self.received)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def world():
    return create_world(viewport=(800, 600), rng=random.Random(1234))


@pytest.fixture
def board_system(world, bus):
    return BoardSystem(world, bus)


@pytest.fixture
def recorder(bus):
    def _make(name: str) -> EventRecorder:
        return EventRecorder(bus, name)
    return _make


@pytest.fixture
def advance(bus):
    """Emit frame ticks of ``step`` seconds until ``seconds`` have elapsed."""
    def _advance(seconds: float, step: float = 0.25) -> None:
        remaining = seconds
        while remaining > 1e-9:
            dt = min(step, remaining)
            bus.emit(EVENT_TICK, dt=dt)
            remaining -= dt
    return _advance


@pytest.fixture
def session(world, bus, board_system):
    loop = GameLoopSystem(world, bus, board_system)
    scoring = ScoringSystem(world, bus, board_system)
    router = InputRouter(bus)
    router.subscribe(scoring.on_letter)
    return SimpleNamespace(
        world=world,
        bus=bus,
        board_system=board_system,
        loop=loop,
        scoring=scoring,
        router=router,
    )
