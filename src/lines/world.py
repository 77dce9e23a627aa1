import random

from esper import World
from .events.bus import EventBus
from lines.components.board import Board
from lines.components.ball_palette import BallPalette, DEFAULT_COLORS
from lines.components.turn_state import TurnState
from lines.constants import BOARD_WIDTH, BOARD_HEIGHT


def create_world(
    event_bus: EventBus,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
    *,
    rng: random.Random | None = None,
    palette: BallPalette | None = None,
) -> World:
    """Build a game session world: one board entity and one state entity.

    The session's random source is attached as ``world.random`` and shared by
    every system that needs randomness.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    world.create_entity(Board(width=width, height=height))
    world.create_entity(
        TurnState(),
        palette or BallPalette(colors=dict(DEFAULT_COLORS)),
    )
    return world
