"""Deterministic board generation."""

from .lcg import Lcg, create
from .random import Draws
from .board import FrontierSet, is_valid_queens, assign_queens, grow_regions, generate_board

__all__ = [
    "Lcg",
    "create",
    "Draws",
    "FrontierSet",
    "is_valid_queens",
    "assign_queens",
    "grow_regions",
    "generate_board",
]
