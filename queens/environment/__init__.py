"""Game session layer for queens boards."""

from .models import GameConfig, GameResult
from .game import Game, clock_seed

__all__ = [
    "GameConfig",
    "GameResult",
    "Game",
    "clock_seed",
]
