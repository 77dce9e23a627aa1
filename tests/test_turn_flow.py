from lines.components.ball import Ball
from lines.components.game_state import GameState
from lines.events.bus import EVENT_TICK, EVENT_LINES_CLEARED, EVENT_BALLS_PLACED
from lines.systems.turn_flow import TurnFlowSystem
from lines.utils.world_access import get_board
from tests.helpers import make_session, place


def drive_ticks(bus, count=60, dt=0.02):
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def test_non_clearing_move_spawns_balls_and_returns_to_selection():
    bus, world, controller = make_session(seed=3)
    TurnFlowSystem(world, bus, controller, balls_per_turn=3)
    board = get_board(world)
    board.set(0, 0, Ball("red"))
    placed = {}
    bus.subscribe(EVENT_BALLS_PLACED, lambda s, **k: placed.update(k))

    controller.select_ball(0, 0)
    controller.start_move(8, 8)
    drive_ticks(bus)

    assert controller.state == GameState.WAITING_FOR_SELECTION
    assert board.get(8, 8) == Ball("red")
    assert len(board.occupied_cells()) == 4
    assert len(placed["balls"]) == 3


def test_clearing_move_skips_spawn():
    bus, world, controller = make_session(seed=3)
    TurnFlowSystem(world, bus, controller)
    board = get_board(world)
    place(board, [(x, 0) for x in range(4)], "red")
    board.set(8, 8, Ball("red"))
    cleared = {}
    bus.subscribe(EVENT_LINES_CLEARED, lambda s, **k: cleared.update(k))

    controller.select_ball(8, 8)
    controller.start_move(4, 0)
    drive_ticks(bus)

    assert cleared["positions"] == [(x, 0) for x in range(5)]
    assert board.occupied_cells() == []
    assert controller.state == GameState.WAITING_FOR_SELECTION


def test_phases_wait_for_their_duration():
    bus, world, controller = make_session()
    TurnFlowSystem(world, bus, controller)
    get_board(world).set(0, 0, Ball("red"))
    controller.select_ball(0, 0)
    controller.start_move(1, 1)

    bus.emit(EVENT_TICK, dt=0.01)
    assert controller.state == GameState.BALL_MOVING
    drive_ticks(bus, count=20, dt=0.01)
    assert controller.state != GameState.BALL_MOVING


def test_idle_phases_are_untouched():
    bus, world, controller = make_session()
    TurnFlowSystem(world, bus, controller)
    get_board(world).set(0, 0, Ball("red"))
    controller.select_ball(0, 0)
    drive_ticks(bus)
    assert controller.state == GameState.BALL_SELECTED


def test_last_spawn_ends_the_game():
    bus, world, controller = make_session(width=1, height=3, seed=5)
    TurnFlowSystem(world, bus, controller, balls_per_turn=3)
    board = get_board(world)
    board.set(0, 0, Ball("red"))
    board.set(0, 1, Ball("blue"))
    controller.select_ball(0, 0)
    controller.start_move(0, 2)
    drive_ticks(bus)
    assert controller.state == GameState.GAME_OVER
    assert board.is_full()


def test_full_board_after_move_ends_the_game():
    bus, world, controller = make_session(width=2, height=2, seed=5)
    TurnFlowSystem(world, bus, controller)
    board = get_board(world)
    board.set(0, 0, Ball("red"))
    board.set(1, 0, Ball("blue"))
    board.set(0, 1, Ball("green"))
    controller.select_ball(0, 0)
    controller.start_move(1, 1)
    bus.emit(EVENT_TICK, dt=0.2)
    assert controller.state == GameState.CLEAR_LINES
    # Fill the vacated source cell so nothing can spawn
    board.set(0, 0, Ball("cyan"))

    drive_ticks(bus)

    assert controller.state == GameState.GAME_OVER
    assert board.get(0, 0) == Ball("cyan")
