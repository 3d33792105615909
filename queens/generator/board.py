"""
Board generation.

A board is built in two steps from one seeded random stream:

1. Queen placement: a permutation of columns (row i holds its marker in
   column columns[i]) where no two markers in consecutive rows touch.
2. Region growth: each marker seeds a region, and the remaining cells are
   claimed one at a time from a random frontier cell by a random already
   claimed neighbour. Regions therefore stay 4-connected and each owns
   exactly one marker.
"""

import logging
from typing import Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from .lcg import create
from .random import Draws
from ..utils.grid import check_size, create_grid, create_uniform_grid, neighbors
from ..verifiers.models import Board, Cell

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FrontierSet(Generic[T]):
    """
    Unordered set with O(1) add and O(1) removal by position.

    Items live in a list; removing swaps the last item into the hole, so
    which item sits at a given position depends only on the sequence of
    adds and removals, never on hashing.
    """

    def __init__(self) -> None:
        self._items: List[T] = []
        self._index: Dict[T, int] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: T) -> bool:
        return item in self._index

    def add(self, item: T) -> None:
        if item in self._index:
            return
        self._index[item] = len(self._items)
        self._items.append(item)

    def pop_at(self, position: int) -> T:
        """Remove and return the item at `position`."""
        item = self._items[position]
        last = self._items.pop()
        del self._index[item]
        if last != item:
            self._items[position] = last
            self._index[last] = position
        return item


def is_valid_queens(columns: Sequence[int]) -> bool:
    """True if no two markers in consecutive rows are diagonal neighbours."""
    for above, below in zip(columns, columns[1:]):
        if abs(above - below) == 1:
            return False
    return True


def assign_queens(size: int, draws: Draws) -> List[int]:
    """
    Pick the marker column for every row.

    Reshuffles until no two consecutive rows have markers in adjacent
    columns. Columns are a permutation, so rows and columns each hold
    exactly one marker and vertical neighbours are impossible.
    """
    columns = draws.shuffle(range(size))
    attempts = 0
    while True:
        attempts += 1
        columns = draws.shuffle(columns)
        if is_valid_queens(columns):
            logger.debug("Placed %d markers after %d shuffles: %s", size, attempts, columns)
            return columns


def grow_regions(queen_columns: Sequence[int], draws: Draws) -> List[List[int]]:
    """
    Partition the grid into one region per marker.

    Row i's marker seeds region i. Returns the region id of every cell.
    """
    size = len(queen_columns)
    regions: List[List[Optional[int]]] = create_uniform_grid(size, None)
    frontier: FrontierSet[Tuple[int, int]] = FrontierSet()

    for row, col in enumerate(queen_columns):
        regions[row][col] = row
    for row, col in enumerate(queen_columns):
        for n_row, n_col in neighbors(size, row, col):
            if regions[n_row][n_col] is None:
                frontier.add((n_row, n_col))

    while len(frontier) > 0:
        row, col = frontier.pop_at(draws.rand(len(frontier)))
        adjacent = neighbors(size, row, col)

        occupied = [(r, c) for r, c in adjacent if regions[r][c] is not None]
        n_row, n_col = occupied[draws.rand(len(occupied))]
        regions[row][col] = regions[n_row][n_col]

        for r, c in adjacent:
            if regions[r][c] is None:
                frontier.add((r, c))

    return regions


def generate_board(size: int, seed: int) -> Board:
    """
    Generate the board for (size, seed).

    The same pair always yields the same board.

    Raises:
        InvalidSize: If size is outside [5, 16]
        InvalidSeed: If seed is outside [0, 2**64)
    """
    check_size(size)
    draws = Draws(create(seed).rand)

    queen_columns = assign_queens(size, draws)
    regions = grow_regions(queen_columns, draws)

    rows = create_grid(size, lambda row, col: Cell(
        row=row,
        col=col,
        region_id=regions[row][col],
        is_marker=queen_columns[row] == col,
    ))
    board = Board(size=size, seed=seed, rows=tuple(tuple(row) for row in rows))

    if logger.isEnabledFor(logging.DEBUG):
        from ..utils.grid_visualizer import render_regions
        logger.debug("Generated board size=%d seed=%d\n%s", size, seed, render_regions(board))

    return board
