"""Selection state and rule validation for queens boards."""

from .errors import QueensError, InvalidSeed, InvalidSize, OutOfRange
from .models import (
    MIN_SIZE,
    MAX_SIZE,
    Cell,
    CellSelect,
    Board,
    Region,
    SelectionGrid,
    Cleared,
    Started,
    Solved,
    Invalid,
    ValidationResult,
)
from .regions import regions_of
from .selection import create_empty, toggle, from_markers
from .rules import validate, is_solved

__all__ = [
    # Validation
    "validate",
    "is_solved",
    # Selection
    "create_empty",
    "toggle",
    "from_markers",
    # Regions
    "regions_of",
    # Models
    "MIN_SIZE",
    "MAX_SIZE",
    "Cell",
    "CellSelect",
    "Board",
    "Region",
    "SelectionGrid",
    "Cleared",
    "Started",
    "Solved",
    "Invalid",
    "ValidationResult",
    # Errors
    "QueensError",
    "InvalidSeed",
    "InvalidSize",
    "OutOfRange",
]
