import string
from typing import List, Optional

from ..verifiers.models import Board, CellSelect, SelectionGrid

REGION_LETTERS = string.ascii_uppercase

MARKS = {
    CellSelect.EMPTY: ".",
    CellSelect.BLOCKED: "x",
    CellSelect.MARKER: "Q",
}


def region_letter(region_id: int) -> str:
    return REGION_LETTERS[region_id % len(REGION_LETTERS)]


def render_regions(board: Board) -> str:
    """Render the board as one letter per cell, one line per row."""
    return "\n".join(
        "".join(region_letter(cell.region_id) for cell in row)
        for row in board.rows
    )


def render_board(
    board: Board,
    selection: Optional[SelectionGrid] = None,
    show_markers: bool = False,
) -> str:
    """
    Render region letters with a mark after each one.

    The mark shows the selection (`.` empty, `x` blocked, `Q` marker).
    Without a selection, `show_markers` marks the board's own marker cells.
    """
    lines: List[str] = []
    for row in board.rows:
        tokens = []
        for cell in row:
            if selection is not None:
                mark = MARKS[CellSelect(selection[cell.row][cell.col])]
            elif show_markers and cell.is_marker:
                mark = MARKS[CellSelect.MARKER]
            else:
                mark = MARKS[CellSelect.EMPTY]
            tokens.append(region_letter(cell.region_id) + mark)
        lines.append(" ".join(tokens))
    return "\n".join(lines)
