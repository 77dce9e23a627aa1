from __future__ import annotations

from typing import Iterable, List, Tuple

from lines.components.board import Board
from lines.constants import MIN_LINE_LENGTH

Position = Tuple[int, int]
Axis = Tuple[int, int]

# Horizontal, vertical, top-left -> bottom-right, bottom-left -> top-right.
AXES: Tuple[Axis, ...] = ((1, 0), (0, 1), (1, 1), (1, -1))


def _reach(board: Board, x: int, y: int, dx: int, dy: int, color: str) -> int:
    """Count consecutive same-colored balls from (x, y) stepping by (dx, dy), pivot excluded."""
    steps = 0
    cx, cy = x + dx, y + dy
    while board.in_bounds(cx, cy):
        ball = board.get(cx, cy)
        if ball is None or ball.color != color:
            break
        steps += 1
        cx += dx
        cy += dy
    return steps


def run_along(board: Board, x: int, y: int, axis: Axis) -> List[Position]:
    """Return the maximal same-colored run through (x, y) along ``axis``, low end first."""
    ball = board.get(x, y)
    if ball is None:
        return []
    dx, dy = axis
    low = -_reach(board, x, y, -dx, -dy, ball.color)
    high = _reach(board, x, y, dx, dy, ball.color)
    return [(x + step * dx, y + step * dy) for step in range(low, high + 1)]


def find_runs(
    board: Board, x: int, y: int, *, min_length: int = MIN_LINE_LENGTH
) -> List[List[Position]]:
    """Return every qualifying run through (x, y), one list per axis that qualifies."""
    runs: List[List[Position]] = []
    for axis in AXES:
        run = run_along(board, x, y, axis)
        if len(run) >= min_length:
            runs.append([pos for pos in run if board.is_occupied(*pos)])
    return runs


def find_lines(board: Board, x: int, y: int, *, min_length: int = MIN_LINE_LENGTH) -> List[Position]:
    """Cells to clear after a ball lands on (x, y).

    Axes are evaluated independently and concatenated in AXES order, so a cell
    on two qualifying runs (always the pivot) is listed once per run.
    """
    return [pos for run in find_runs(board, x, y, min_length=min_length) for pos in run]


def unique_positions(positions: Iterable[Position]) -> List[Position]:
    """Drop repeats while keeping first-seen order."""
    return list(dict.fromkeys(positions))
