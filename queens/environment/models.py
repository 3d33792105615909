"""
Pydantic models for the game session layer.

Configuration and serialized results live here; the session logic itself is
in game.py.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..verifiers.models import MAX_SIZE, MIN_SIZE


class GameConfig(BaseModel):
    """Configuration for a single game."""
    size: int = Field(default=8, ge=MIN_SIZE, le=MAX_SIZE)
    seed: Optional[int] = Field(default=None, ge=0, lt=1 << 64)  # None: seed from the clock


class GameResult(BaseModel):
    """Serializable snapshot of a game."""
    size: int
    seed: int
    state: str
    regions: List[List[int]] = Field(default_factory=list)
    queen_columns: List[int] = Field(default_factory=list)
    selection: List[List[int]] = Field(default_factory=list)
    markers_placed: int = 0
