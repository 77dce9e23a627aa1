from __future__ import annotations

import random
from typing import List, Sequence, Tuple

from lines.components.ball import Ball
from lines.components.ball_palette import BallPalette

Position = Tuple[int, int]


def choose_spawn_positions(
    empty_cells: Sequence[Position],
    requested_balls: Sequence[Ball],
    rng: random.Random,
) -> List[Tuple[Position, Ball]]:
    """Pair requested balls, in order, with distinct empty cells drawn uniformly at random.

    At most ``len(empty_cells)`` balls are placed; surplus requests are dropped.
    """
    count = min(len(requested_balls), len(empty_cells))
    if count == 0:
        return []
    cells = rng.sample(list(empty_cells), count)
    return list(zip(cells, list(requested_balls)[:count]))


def random_balls(palette: BallPalette, count: int, rng: random.Random) -> List[Ball]:
    """Build ``count`` balls with colors drawn from the palette's spawnable set."""
    choices = palette.spawnable_colors()
    return [Ball(color=rng.choice(choices)) for _ in range(count)]
