"""
Validation of a player's selection against a board.

Checks, for the cells currently marked as markers:
1. No region holds more than one marker
2. No row or column holds more than one marker
3. No marker has another marker on a diagonal neighbour

Orthogonal neighbours need no separate check: they always share a row or
a column, which rule 2 already reports.
"""

from collections import Counter
from typing import List, Set

from .errors import OutOfRange
from .models import (
    Board,
    CellSelect,
    Cleared,
    Coord,
    Invalid,
    Region,
    SelectionGrid,
    Solved,
    Started,
    ValidationResult,
)
from .regions import regions_of


DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _check_shape(board: Board, selection: SelectionGrid) -> None:
    if len(selection) != board.size or any(len(row) != board.size for row in selection):
        raise OutOfRange(
            f"Selection shape does not match a {board.size}x{board.size} board"
        )


def find_diagonal_conflicts(markers: Set[Coord]) -> List[Coord]:
    """Every marker touching another marker diagonally, in row-major order."""
    conflicts: List[Coord] = []
    for row, col in sorted(markers):
        if any((row + dr, col + dc) in markers for dr, dc in DIAGONALS):
            conflicts.append((row, col))
    return conflicts


def validate(board: Board, selection: SelectionGrid) -> ValidationResult:
    """
    Classify `selection` against `board`.

    Returns Invalid (with every conflict found) if any rule is broken,
    otherwise Solved when all markers are placed, Cleared when nothing is
    marked at all, and Started in every other case.

    Raises:
        OutOfRange: If the selection is not the board's size
    """
    _check_shape(board, selection)

    invalid_regions: List[Region] = []
    rows: Counter = Counter()
    cols: Counter = Counter()
    markers: Set[Coord] = set()

    for region in regions_of(board):
        in_region = 0
        for cell in region.cells:
            if selection[cell.row][cell.col] == CellSelect.MARKER:
                in_region += 1
                rows[cell.row] += 1
                cols[cell.col] += 1
                markers.add((cell.row, cell.col))
        if in_region > 1:
            invalid_regions.append(region)

    num_empty = sum(
        1 for row in selection for value in row if value == CellSelect.EMPTY
    )

    invalid_rows = sorted(row for row, count in rows.items() if count > 1)
    invalid_cols = sorted(col for col, count in cols.items() if count > 1)
    invalid_diagonals = find_diagonal_conflicts(markers)

    if invalid_regions or invalid_rows or invalid_cols or invalid_diagonals:
        return Invalid(
            invalid_regions=invalid_regions,
            invalid_rows=invalid_rows,
            invalid_cols=invalid_cols,
            invalid_diagonals=invalid_diagonals,
        )

    if len(markers) == board.size:
        return Solved()
    if num_empty == board.size * board.size:
        return Cleared()
    return Started()


def is_solved(board: Board, selection: SelectionGrid) -> bool:
    """Shortcut for `validate(board, selection).state == "solved"`."""
    return validate(board, selection).state == "solved"
