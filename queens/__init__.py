"""
Queens: seeded puzzle board generation and selection validation.

Place one marker in every row, column and region of an N x N board with no
two markers touching, even diagonally.
"""

from .environment import Game, GameConfig, GameResult
from .generator import generate_board
from .verifiers import (
    Board,
    Cell,
    CellSelect,
    Region,
    ValidationResult,
    create_empty,
    regions_of,
    toggle,
    validate,
)

__version__ = "0.1.0"
__all__ = [
    # Generation
    "generate_board",
    "regions_of",
    # Selection and validation
    "create_empty",
    "toggle",
    "validate",
    # Models
    "Board",
    "Cell",
    "CellSelect",
    "Region",
    "ValidationResult",
    # Game session
    "Game",
    "GameConfig",
    "GameResult",
]
