from typing import Tuple

from keypop.constants import BOARD_MARGIN_X, BOARD_MARGIN_Y


def board_dimensions(viewport_width: int, viewport_height: int) -> Tuple[int, int]:
    """Board size derived from the viewport; computed once when the board is created."""
    return int(viewport_width) - BOARD_MARGIN_X, int(viewport_height) - BOARD_MARGIN_Y


def compute_board_geometry(window_width: float, window_height: float, board_width: int, board_height: int):
    """Return (left, bottom, top) of the board rectangle in window coordinates.

    The board keeps the size it was created with; resizing the window only recenters it.
    """
    left = (window_width - board_width) / 2
    bottom = (window_height - board_height) / 2
    return left, bottom, bottom + board_height


def bubble_screen_position(left: float, top: float, x: int, y: int) -> Tuple[float, float]:
    """Convert board-local coordinates (origin top-left) to arcade's bottom-left origin."""
    return left + x, top - y
