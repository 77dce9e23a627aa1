from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from lines.components.ball import Ball
from lines.errors import OutOfRangeError

Position = Tuple[int, int]


@dataclass(slots=True)
class Board:
    """Fixed-size grid of optional balls addressed by ``(x, y)``.

    The backing storage stays private; queries return balls (immutable) or
    freshly built containers so callers cannot alias the grid.
    """
    width: int
    height: int
    _cells: List[List[Optional[Ball]]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")
        self._cells = [[None] * self.height for _ in range(self.width)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfRangeError.for_cell(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> Optional[Ball]:
        self._check(x, y)
        return self._cells[x][y]

    def set(self, x: int, y: int, ball: Optional[Ball]) -> None:
        """Store ``ball`` at ``(x, y)``, replacing whatever was there."""
        self._check(x, y)
        self._cells[x][y] = ball

    def is_occupied(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._cells[x][y] is not None

    def can_move_to(self, x: int, y: int) -> bool:
        # Only bounds and occupancy; reachability through empty cells is not checked.
        return self.in_bounds(x, y) and self._cells[x][y] is None

    def empty_cells(self) -> List[Position]:
        return [
            (x, y)
            for x in range(self.width)
            for y in range(self.height)
            if self._cells[x][y] is None
        ]

    def has_empty_cell(self) -> bool:
        return any(cell is None for column in self._cells for cell in column)

    def is_full(self) -> bool:
        return not self.has_empty_cell()

    def occupied_cells(self) -> List[Tuple[Position, Ball]]:
        return [
            ((x, y), ball)
            for x, column in enumerate(self._cells)
            for y, ball in enumerate(column)
            if ball is not None
        ]

    def snapshot(self) -> Dict[Position, Ball]:
        """Return a detached mapping of occupied positions to balls."""
        return dict(self.occupied_cells())

    def clear(self) -> None:
        for column in self._cells:
            for y in range(self.height):
                column[y] = None
