"""Phase enumeration for the Lines turn cycle."""
from enum import Enum, auto


class GameState(Enum):
    """Exactly one phase is active at a time; GAME_OVER is terminal."""
    WAITING_FOR_SELECTION = auto()
    BALL_SELECTED = auto()
    BALL_MOVING = auto()
    CLEAR_LINES = auto()
    SHOOT_NEW_BALLS = auto()
    GAME_OVER = auto()
