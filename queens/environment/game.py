import logging
import time
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import GameConfig, GameResult
from ..generator.board import generate_board
from ..verifiers.models import Board, CellSelect, Cleared, SelectionGrid, ValidationResult
from ..verifiers.rules import validate
from ..verifiers.selection import create_empty, toggle as toggle_cell

logger = logging.getLogger(__name__)


def clock_seed() -> int:
    """Milliseconds since the epoch, used when no seed is given."""
    return time.time_ns() // 1_000_000


class Game(BaseModel):
    """
    One puzzle in progress: a generated board plus the player's selection.

    The board is fixed by (size, seed). The selection is changed one cell at
    a time with `toggle`, and `status` always holds the validation result for
    the current selection.

    Attributes:
        config: Size and seed the board was generated from
        board: The generated board
        selection: The player's markings, mutated in place
        status: Result of the latest validation
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig
    board: Board
    selection: SelectionGrid
    status: ValidationResult = Field(default_factory=Cleared)

    @classmethod
    def create(cls, config: Optional[GameConfig] = None, **config_kwargs: Any) -> "Game":
        """
        Factory method to create a game with a freshly generated board.

        Args:
            config: Optional GameConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            A new Game with an empty selection
        """
        if config is None:
            config = GameConfig(**config_kwargs)
        if config.seed is None:
            config = config.model_copy(update={"seed": clock_seed()})

        board = generate_board(config.size, config.seed)
        logger.debug("New game size=%d seed=%d", config.size, config.seed)
        return cls(config=config, board=board, selection=create_empty(config.size))

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def seed(self) -> int:
        return self.board.seed

    @property
    def is_solved(self) -> bool:
        return self.status.state == "solved"

    @property
    def size_locked(self) -> bool:
        """The size can only change while nothing is marked."""
        return self.status.state != "cleared"

    @property
    def markers_placed(self) -> int:
        return sum(1 for row in self.selection for value in row if value == CellSelect.MARKER)

    def toggle(self, row: int, col: int) -> ValidationResult:
        """
        Cycle the cell at (row, col) and re-validate.

        Once the puzzle is solved further toggles are ignored.

        Raises:
            OutOfRange: If (row, col) is not on the board
        """
        if self.is_solved:
            return self.status
        toggle_cell(self.selection, row, col)
        self.status = validate(self.board, self.selection)
        return self.status

    def reset(self) -> None:
        """Clear the selection, keeping the board."""
        self.selection = create_empty(self.size)
        self.status = Cleared()

    def new_game(self, seed: Optional[int] = None) -> None:
        """Generate a new board of the same size, seeded from the clock by default."""
        self._regenerate(self.config.model_copy(update={"seed": seed}))

    def resize(self, size: int) -> None:
        """
        Regenerate the board at a new size with the same seed.

        Raises:
            ValueError: If play has already started
        """
        if self.size_locked:
            raise ValueError("Cannot change the board size once play has started")
        self._regenerate(GameConfig(size=size, seed=self.seed))

    def _regenerate(self, config: GameConfig) -> None:
        fresh = Game.create(config=config)
        self.config = fresh.config
        self.board = fresh.board
        self.reset()

    def share_params(self) -> Dict[str, int]:
        """The values needed to reproduce this board elsewhere."""
        return {"seed": self.seed, "size": self.size}

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Returns:
            Dictionary containing game state
        """
        return {
            "size": self.size,
            "seed": self.seed,
            "state": self.status.state,
            "markers_placed": self.markers_placed,
            "size_locked": self.size_locked,
        }

    def get_result(self) -> GameResult:
        return GameResult(
            size=self.size,
            seed=self.seed,
            state=self.status.state,
            regions=self.board.region_grid(),
            queen_columns=self.board.queen_columns,
            selection=[[int(value) for value in row] for row in self.selection],
            markers_placed=self.markers_placed,
        )
