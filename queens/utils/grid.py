"""Square grid helpers shared by generation and selection."""

from typing import Callable, Iterator, List, Tuple, TypeVar

from ..verifiers.errors import InvalidSize, OutOfRange
from ..verifiers.models import MAX_SIZE, MIN_SIZE

T = TypeVar("T")


def check_size(size: int) -> int:
    """Return `size` unchanged, raising InvalidSize outside [MIN_SIZE, MAX_SIZE]."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSize(f"Board size must be an integer, got {size!r}")
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise InvalidSize(f"Board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}")
    return size


def check_coord(size: int, row: int, col: int) -> None:
    if not (0 <= row < size and 0 <= col < size):
        raise OutOfRange(f"Cell ({row}, {col}) is outside a {size}x{size} grid")


def create_grid(size: int, create_cell: Callable[[int, int], T]) -> List[List[T]]:
    """Build a size x size grid by calling create_cell(row, col) for each cell."""
    return [[create_cell(row, col) for col in range(size)] for row in range(size)]


def create_uniform_grid(size: int, value: T) -> List[List[T]]:
    return create_grid(size, lambda row, col: value)


def iter_cells(grid: List[List[T]]) -> Iterator[Tuple[T, int, int]]:
    """Yield (value, row, col) for every cell in row-major order."""
    for row, values in enumerate(grid):
        for col, value in enumerate(values):
            yield value, row, col


def neighbors(size: int, row: int, col: int) -> List[Tuple[int, int]]:
    """Orthogonal neighbours inside the grid, in up, left, down, right order."""
    result = []
    if row > 0:
        result.append((row - 1, col))
    if col > 0:
        result.append((row, col - 1))
    if row < size - 1:
        result.append((row + 1, col))
    if col < size - 1:
        result.append((row, col + 1))
    return result
