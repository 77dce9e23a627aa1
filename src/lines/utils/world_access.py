from esper import World

from lines.components.ball_palette import BallPalette
from lines.components.board import Board
from lines.components.turn_state import TurnState


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def get_palette(world: World) -> BallPalette:
    for _, palette in world.get_component(BallPalette):
        return palette
    raise RuntimeError("BallPalette component not found")


def get_turn_state(world: World) -> TurnState:
    for _, turn in world.get_component(TurnState):
        return turn
    raise RuntimeError("TurnState component not found")
