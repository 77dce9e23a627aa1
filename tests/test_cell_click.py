from lines.components.ball import Ball
from lines.components.game_state import GameState
from lines.events.bus import EVENT_CELL_CLICK, EVENT_BALL_DESELECTED
from lines.systems.cell_click import CellClickSystem
from lines.utils.world_access import get_board
from tests.helpers import make_session


def _setup():
    bus, world, controller = make_session()
    CellClickSystem(bus, controller)
    board = get_board(world)
    board.set(2, 2, Ball("red"))
    board.set(6, 6, Ball("blue"))
    return bus, board, controller


def test_click_ball_then_empty_cell_starts_move():
    bus, board, controller = _setup()
    bus.emit(EVENT_CELL_CLICK, x=2, y=2, button=1)
    assert controller.state == GameState.BALL_SELECTED
    bus.emit(EVENT_CELL_CLICK, x=5, y=5, button=1)
    assert controller.state == GameState.BALL_MOVING
    assert controller.moving_destination == (5, 5)
    assert board.get(2, 2) is None


def test_click_other_ball_switches_selection():
    bus, _, controller = _setup()
    bus.emit(EVENT_CELL_CLICK, x=2, y=2, button=1)
    bus.emit(EVENT_CELL_CLICK, x=6, y=6, button=1)
    assert controller.selected_cell == (6, 6)
    assert controller.state == GameState.BALL_SELECTED


def test_click_empty_cell_without_selection_is_ignored():
    bus, _, controller = _setup()
    bus.emit(EVENT_CELL_CLICK, x=0, y=0, button=1)
    assert controller.state == GameState.WAITING_FOR_SELECTION


def test_right_click_clears_selection():
    bus, _, controller = _setup()
    deselected = {}
    bus.subscribe(EVENT_BALL_DESELECTED, lambda s, **k: deselected.update(k))
    bus.emit(EVENT_CELL_CLICK, x=2, y=2, button=1)
    bus.emit(EVENT_CELL_CLICK, x=0, y=0, button=4)
    assert controller.state == GameState.WAITING_FOR_SELECTION
    assert deselected == {"x": 2, "y": 2, "reason": "right_click"}


def test_clicks_ignored_while_ball_in_transit():
    bus, _, controller = _setup()
    bus.emit(EVENT_CELL_CLICK, x=2, y=2, button=1)
    bus.emit(EVENT_CELL_CLICK, x=5, y=5, button=1)
    bus.emit(EVENT_CELL_CLICK, x=6, y=6, button=1)
    assert controller.state == GameState.BALL_MOVING
