from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Sequence, Tuple

from esper import World

from lines.components.ball import Ball
from lines.components.game_state import GameState
from lines.constants import INITIAL_BALLS
from lines.errors import CommandResult, GameError
from lines.events.bus import (
    EventBus,
    EVENT_BALL_SELECTED,
    EVENT_BALL_DESELECTED,
    EVENT_BALL_MOVE_STARTED,
    EVENT_BALL_MOVE_ENDED,
    EVENT_LINES_CLEARED,
    EVENT_BALLS_SHOT,
    EVENT_BALLS_PLACED,
    EVENT_NEW_GAME_STARTED,
    EVENT_STATE_CHANGED,
    EVENT_GAME_OVER,
    EVENT_COMMAND_REJECTED,
)
from lines.systems.line_matcher import find_lines, unique_positions
from lines.systems.spawner import choose_spawn_positions, random_balls
from lines.utils.world_access import get_board, get_palette, get_turn_state

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class GameController:
    """Turn state machine: select -> move -> clear -> spawn -> next turn or game over.

    Every command validates before touching the board or the turn state and
    returns a CommandResult; a failed command leaves everything as it was.
    Successful transitions are published on the event bus for renderers.
    """

    def __init__(self, world: World, event_bus: EventBus, rng: Optional[random.Random] = None):
        self.world = world
        self.event_bus = event_bus
        self.random = rng if rng is not None else world.random
        self._board = get_board(world)
        self._turn = get_turn_state(world)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def state(self) -> GameState:
        return self._turn.state

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def selected_cell(self) -> Optional[Position]:
        return self._turn.selected_cell

    @property
    def selected_ball(self) -> Optional[Ball]:
        cell = self._turn.selected_cell
        if cell is None or self._turn.state != GameState.BALL_SELECTED:
            return None
        return self._board.get(*cell)

    @property
    def moving_ball(self) -> Optional[Ball]:
        return self._turn.moving_ball

    @property
    def moving_destination(self) -> Optional[Position]:
        return self._turn.moving_destination

    @property
    def balls_to_clear(self) -> Tuple[Position, ...]:
        return tuple(self._turn.balls_to_clear)

    @property
    def balls_to_shoot(self) -> Tuple[Tuple[Position, Ball], ...]:
        return tuple(self._turn.balls_to_shoot)

    def in_bounds(self, x: int, y: int) -> bool:
        return self._board.in_bounds(x, y)

    def get(self, x: int, y: int) -> Optional[Ball]:
        return self._board.get(x, y)

    def is_occupied(self, x: int, y: int) -> bool:
        return self._board.is_occupied(x, y)

    def empty_cells(self) -> List[Position]:
        return self._board.empty_cells()

    def can_move_to(self, x: int, y: int) -> bool:
        return self._board.can_move_to(x, y)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def new_game(self, initial_balls: Optional[Sequence[Ball]] = None) -> CommandResult:
        """Empty the board and drop the initial balls on random cells.

        Rejected once the game is over; a finished session is replaced, not restarted.
        """
        if self._turn.state == GameState.GAME_OVER:
            return self._reject("new_game", GameError.PRECONDITION_NOT_MET, "game is over")
        if initial_balls is None:
            initial_balls = random_balls(get_palette(self.world), INITIAL_BALLS, self.random)
        self._board.clear()
        self._turn.clear_phase_fields()
        placed = choose_spawn_positions(self._board.empty_cells(), list(initial_balls), self.random)
        for (x, y), ball in placed:
            self._board.set(x, y, ball)
        self.event_bus.emit(
            EVENT_NEW_GAME_STARTED, width=self.width, height=self.height, balls=list(placed)
        )
        if self._board.has_empty_cell():
            self._transition(GameState.WAITING_FOR_SELECTION)
        else:
            self._finish("board_full")
        return CommandResult.success(placed)

    def select_ball(self, x: int, y: int) -> CommandResult:
        state = self._turn.state
        if state not in (GameState.WAITING_FOR_SELECTION, GameState.BALL_SELECTED):
            return self._reject("select_ball", GameError.PRECONDITION_NOT_MET, f"cannot select while {state.name}")
        if not self._board.in_bounds(x, y):
            return self._reject("select_ball", GameError.OUT_OF_RANGE, f"({x}, {y}) is off the board")
        ball = self._board.get(x, y)
        if ball is None:
            return self._reject("select_ball", GameError.INVALID_SELECTION, f"({x}, {y}) is empty")
        previous = self._turn.selected_cell
        if previous is not None and previous != (x, y):
            self.event_bus.emit(EVENT_BALL_DESELECTED, x=previous[0], y=previous[1], reason="reselect")
        self._turn.selected_cell = (x, y)
        self._transition(GameState.BALL_SELECTED)
        self.event_bus.emit(EVENT_BALL_SELECTED, x=x, y=y, ball=ball)
        return CommandResult.success(ball)

    def cancel_selection(self, reason: str = "cancelled") -> CommandResult:
        cell = self._turn.selected_cell
        if self._turn.state != GameState.BALL_SELECTED or cell is None:
            return self._reject("cancel_selection", GameError.PRECONDITION_NOT_MET, "no ball selected")
        self._turn.selected_cell = None
        self._transition(GameState.WAITING_FOR_SELECTION)
        self.event_bus.emit(EVENT_BALL_DESELECTED, x=cell[0], y=cell[1], reason=reason)
        return CommandResult.success(cell)

    def start_move(self, x: int, y: int) -> CommandResult:
        src = self._turn.selected_cell
        ball = self.selected_ball
        if self._turn.state != GameState.BALL_SELECTED or src is None or ball is None:
            return self._reject("start_move", GameError.PRECONDITION_NOT_MET, "no ball selected")
        if not self._board.can_move_to(x, y):
            return self._reject("start_move", GameError.PRECONDITION_NOT_MET, f"cannot move to ({x}, {y})")
        self._board.set(src[0], src[1], None)
        self._turn.moving_ball = ball
        self._turn.moving_destination = (x, y)
        self._transition(GameState.BALL_MOVING)
        self.event_bus.emit(EVENT_BALL_MOVE_STARTED, src=src, dst=(x, y), ball=ball)
        return CommandResult.success((x, y))

    def end_move(self) -> CommandResult:
        ball = self._turn.moving_ball
        dst = self._turn.moving_destination
        if self._turn.state != GameState.BALL_MOVING or ball is None or dst is None:
            return self._reject("end_move", GameError.PRECONDITION_NOT_MET, "no ball in transit")
        self._board.set(dst[0], dst[1], ball)
        self._turn.moving_ball = None
        self._turn.moving_destination = None
        self._turn.selected_cell = None
        self._turn.balls_to_clear.clear()
        self._turn.balls_to_clear.extend(find_lines(self._board, dst[0], dst[1]))
        to_clear = list(self._turn.balls_to_clear)
        self._transition(GameState.CLEAR_LINES)
        self.event_bus.emit(EVENT_BALL_MOVE_ENDED, dst=dst, ball=ball, balls_to_clear=to_clear)
        return CommandResult.success(to_clear)

    def clear_and_spawn(self, new_balls: Iterable[Ball]) -> CommandResult:
        """Remove the pending lines, then pick cells for ``new_balls``.

        Reports BOARD_FULL without changing anything when there is nothing to
        clear and no empty cell to spawn into.
        """
        if self._turn.state != GameState.CLEAR_LINES:
            return self._reject("clear_and_spawn", GameError.PRECONDITION_NOT_MET, "no lines pending")
        to_clear = unique_positions(self._turn.balls_to_clear)
        if not to_clear and not self._board.has_empty_cell():
            return self._reject("clear_and_spawn", GameError.BOARD_FULL, "no empty cell to spawn into")
        requested = list(new_balls)
        for x, y in to_clear:
            self._board.set(x, y, None)
        self._turn.balls_to_clear.clear()
        if to_clear:
            self.event_bus.emit(EVENT_LINES_CLEARED, positions=sorted(to_clear))
        self._turn.balls_to_shoot.clear()
        self._turn.balls_to_shoot.extend(
            choose_spawn_positions(self._board.empty_cells(), requested, self.random)
        )
        shots = list(self._turn.balls_to_shoot)
        self._transition(GameState.SHOOT_NEW_BALLS)
        self.event_bus.emit(EVENT_BALLS_SHOT, balls=shots)
        return CommandResult.success(shots)

    def apply_new_balls_and_advance(self) -> CommandResult:
        # Spawned balls are placed as-is; lines they happen to form stay on the board.
        if self._turn.state != GameState.SHOOT_NEW_BALLS:
            return self._reject("apply_new_balls_and_advance", GameError.PRECONDITION_NOT_MET, "no balls to shoot")
        placed = list(self._turn.balls_to_shoot)
        for (x, y), ball in placed:
            self._board.set(x, y, ball)
        self._turn.balls_to_shoot.clear()
        next_state = GameState.WAITING_FOR_SELECTION if self._board.has_empty_cell() else GameState.GAME_OVER
        self.event_bus.emit(EVENT_BALLS_PLACED, balls=placed, next_state=next_state)
        if next_state == GameState.GAME_OVER:
            self._finish("board_full")
        else:
            self._transition(next_state)
        return CommandResult.success(next_state)

    def end_game_if_full(self) -> CommandResult:
        """Close a turn that filled the board without clearing anything."""
        if (
            self._turn.state != GameState.CLEAR_LINES
            or self._turn.balls_to_clear
            or self._board.has_empty_cell()
        ):
            return self._reject("end_game_if_full", GameError.PRECONDITION_NOT_MET, "board is not full")
        self._finish("board_full")
        return CommandResult.success(GameState.GAME_OVER)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _transition(self, new_state: GameState) -> None:
        previous = self._turn.state
        self._turn.state = new_state
        if previous != new_state:
            self.event_bus.emit(EVENT_STATE_CHANGED, previous_state=previous, new_state=new_state)

    def _finish(self, reason: str) -> None:
        self._transition(GameState.GAME_OVER)
        logger.info("Game over (%s)", reason)
        self.event_bus.emit(EVENT_GAME_OVER, reason=reason)

    def _reject(self, command: str, error: GameError, message: str) -> CommandResult:
        logger.debug("%s rejected: %s (%s)", command, error.value, message)
        self.event_bus.emit(EVENT_COMMAND_REJECTED, command=command, error=error, message=message)
        return CommandResult.failure(error, message)
