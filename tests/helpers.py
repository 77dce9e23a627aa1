from __future__ import annotations

import random
from typing import Iterable, Tuple

from esper import World

from lines.components.ball import Ball
from lines.components.board import Board
from lines.errors import CommandResult
from lines.events.bus import EventBus
from lines.systems.game_controller import GameController
from lines.world import create_world


def make_session(width: int = 9, height: int = 9, seed: int = 0) -> Tuple[EventBus, World, GameController]:
    """Build a bus, world and controller sharing a seeded random source."""

    bus = EventBus()
    world = create_world(bus, width, height, rng=random.Random(seed))
    controller = GameController(world, bus)
    return bus, world, controller


def place(board: Board, positions: Iterable[Tuple[int, int]], color: str) -> None:
    for x, y in positions:
        board.set(x, y, Ball(color))


def play_move(controller: GameController, src: Tuple[int, int], dst: Tuple[int, int]) -> CommandResult:
    """Select src, move to dst and land the ball; returns the end_move result."""

    assert controller.select_ball(*src), f"could not select {src}"
    assert controller.start_move(*dst), f"could not move to {dst}"
    return controller.end_move()
