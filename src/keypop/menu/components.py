"""Components used by the start and game-over menus."""
from dataclasses import dataclass
from enum import Enum, auto

from keypop.constants import BUTTON_HEIGHT, BUTTON_WIDTH


class MenuAction(Enum):
    """Actions that a menu button can trigger."""
    START = auto()
    RESTART = auto()


@dataclass
class MenuButton:
    """Interactive button; activating it is the session start signal."""
    label: str
    action: MenuAction
    x: float
    y: float
    width: float = BUTTON_WIDTH
    height: float = BUTTON_HEIGHT
    enabled: bool = True


@dataclass
class MenuBanner:
    """Static text shown above the buttons (title or final score)."""
    text: str
    x: float
    y: float
    font_size: int = 28


@dataclass
class MenuTag:
    """Marker component so menu entities can be cleaned up together."""
    pass
