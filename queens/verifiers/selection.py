"""Player selection grid."""

import logging
from typing import Iterable, Tuple

from .models import CellSelect, SelectionGrid
from ..utils.grid import check_coord, check_size, create_uniform_grid

logger = logging.getLogger(__name__)

_NEXT = {
    CellSelect.EMPTY: CellSelect.BLOCKED,
    CellSelect.BLOCKED: CellSelect.MARKER,
    CellSelect.MARKER: CellSelect.EMPTY,
}


def create_empty(size: int) -> SelectionGrid:
    """Return a size x size grid with every cell EMPTY."""
    return create_uniform_grid(check_size(size), CellSelect.EMPTY)


def toggle(grid: SelectionGrid, row: int, col: int) -> SelectionGrid:
    """
    Cycle a cell EMPTY -> BLOCKED -> MARKER -> EMPTY.

    The grid is changed in place and the same list is returned.

    Raises:
        OutOfRange: If (row, col) is not on the grid
    """
    check_coord(len(grid), row, col)
    current = CellSelect(grid[row][col])
    grid[row][col] = _NEXT[current]
    logger.debug("Toggled (%d, %d): %s -> %s", row, col, current.name, grid[row][col].name)
    return grid


def from_markers(size: int, coords: Iterable[Tuple[int, int]]) -> SelectionGrid:
    """Build a selection with MARKER at each of `coords` and EMPTY elsewhere."""
    grid = create_empty(size)
    for row, col in coords:
        check_coord(size, row, col)
        grid[row][col] = CellSelect.MARKER
    return grid
