from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from lines.components.ball import Ball
from lines.components.game_state import GameState

Position = Tuple[int, int]


@dataclass(slots=True)
class TurnState:
    """Tracks the current phase and the fields that phase owns.

    selected_cell is meaningful in BALL_SELECTED/BALL_MOVING, moving_ball and
    moving_destination in BALL_MOVING, balls_to_clear in CLEAR_LINES and
    balls_to_shoot in SHOOT_NEW_BALLS.
    """

    state: GameState = GameState.WAITING_FOR_SELECTION
    selected_cell: Optional[Position] = None
    moving_ball: Optional[Ball] = None
    moving_destination: Optional[Position] = None
    balls_to_clear: List[Position] = field(default_factory=list)
    balls_to_shoot: List[Tuple[Position, Ball]] = field(default_factory=list)

    def clear_phase_fields(self) -> None:
        self.selected_cell = None
        self.moving_ball = None
        self.moving_destination = None
        self.balls_to_clear.clear()
        self.balls_to_shoot.clear()
