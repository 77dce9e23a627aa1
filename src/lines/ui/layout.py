from typing import Optional, Tuple

from lines.constants import TILE_SIZE, BOTTOM_MARGIN


def compute_board_geometry(window_width: int, window_height: int, cols: int, rows: int):
    """Return (tile_size, start_x, start_y) for a board centred horizontally above the bottom margin.

    Shared by rendering and input mapping so clicks land on the cell that is drawn.
    """
    tile_by_w = window_width / cols
    tile_by_h = (window_height - BOTTOM_MARGIN) / rows
    tile_size = int(min(TILE_SIZE, tile_by_w, tile_by_h))
    if tile_size < 20:
        tile_size = 20
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_at(px: float, py: float, window_width: int, window_height: int, cols: int, rows: int) -> Optional[Tuple[int, int]]:
    """Map a window point to a board cell, or None when it falls outside the grid.

    Row 0 is drawn at the top of the board; window y grows upwards.
    """
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, cols, rows)
    col = int((px - start_x) // tile_size)
    row_from_bottom = int((py - start_y) // tile_size)
    if not (0 <= col < cols and 0 <= row_from_bottom < rows):
        return None
    return col, rows - 1 - row_from_bottom


def cell_center(x: int, y: int, window_width: int, window_height: int, cols: int, rows: int) -> Tuple[float, float]:
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, cols, rows)
    cx = start_x + x * tile_size + tile_size / 2
    cy = start_y + (rows - 1 - y) * tile_size + tile_size / 2
    return cx, cy
