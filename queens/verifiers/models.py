"""Data models for boards, selections and validation results."""

from enum import IntEnum
from typing import Annotated, Dict, Iterator, List, Literal, NamedTuple, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import OutOfRange


MIN_SIZE = 5
MAX_SIZE = 16

Coord = Tuple[int, int]


class Cell(NamedTuple):
    """A single board cell and the region that owns it."""
    row: int
    col: int
    region_id: int
    is_marker: bool


class CellSelect(IntEnum):
    """Player marking of a single cell."""
    EMPTY = 0
    BLOCKED = 1
    MARKER = 2


SelectionGrid = List[List[CellSelect]]


class Board(BaseModel):
    """
    A generated N x N board, row-major.

    Every row and every column holds exactly one marker cell, and the
    region ids partition the grid into N contiguous regions that each own
    one marker. Boards never change once generated.
    """

    model_config = ConfigDict(frozen=True)

    size: int = Field(..., ge=MIN_SIZE, le=MAX_SIZE)
    seed: int = Field(..., ge=0)
    rows: Tuple[Tuple[Cell, ...], ...]

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell at (row, col), raising OutOfRange outside the grid."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfRange(f"Cell ({row}, {col}) is outside a {self.size}x{self.size} board")
        return self.rows[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in self.rows:
            yield from row

    def markers(self) -> List[Cell]:
        """The marker cells, one per row, top to bottom."""
        return [cell for cell in self.cells() if cell.is_marker]

    @property
    def queen_columns(self) -> List[int]:
        """Column of the marker in each row."""
        return [cell.col for cell in self.markers()]

    def region_grid(self) -> List[List[int]]:
        """Region ids as a plain nested list."""
        return [[cell.region_id for cell in row] for row in self.rows]


class Region(BaseModel):
    """All cells sharing one region id."""
    region_id: int
    cells: List[Cell] = Field(default_factory=list)
    cell_map: Dict[Coord, Cell] = Field(default_factory=dict)

    def add(self, cell: Cell) -> None:
        self.cells.append(cell)
        self.cell_map[(cell.row, cell.col)] = cell

    def __contains__(self, coord: Coord) -> bool:
        return tuple(coord) in self.cell_map

    def __len__(self) -> int:
        return len(self.cells)


class Cleared(BaseModel):
    """Nothing has been marked yet."""
    state: Literal["cleared"] = "cleared"


class Started(BaseModel):
    """Some cells are marked, no conflicts, not yet complete."""
    state: Literal["started"] = "started"


class Solved(BaseModel):
    """One marker per row, column and region with no markers touching."""
    state: Literal["solved"] = "solved"


class Invalid(BaseModel):
    """At least one rule is broken by the current markers."""
    state: Literal["invalid"] = "invalid"
    invalid_regions: List[Region] = Field(default_factory=list)
    invalid_rows: List[int] = Field(default_factory=list)
    invalid_cols: List[int] = Field(default_factory=list)
    invalid_diagonals: List[Coord] = Field(default_factory=list)

    @property
    def invalid_region_ids(self) -> List[int]:
        return [region.region_id for region in self.invalid_regions]


ValidationResult = Annotated[
    Union[Cleared, Started, Solved, Invalid],
    Field(discriminator="state"),
]
