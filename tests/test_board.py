"""Tests for queen placement, region growth and board generation."""

from collections import deque

import pytest
from pydantic import ValidationError

from queens.generator import (
    Draws,
    FrontierSet,
    assign_queens,
    create,
    generate_board,
    grow_regions,
    is_valid_queens,
)
from queens.verifiers import InvalidSeed, InvalidSize, OutOfRange, regions_of


SIZES = list(range(5, 17))
SEEDS = [0, 1, 42, 12345, 2**64 - 1]


def board_cases():
    return [(size, seed) for size in SIZES for seed in SEEDS]


def is_connected(coords):
    """4-connectivity check by breadth-first search."""
    coords = set(coords)
    start = next(iter(coords))
    seen = {start}
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        for nxt in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if nxt in coords and nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen == coords


class TestFrontierSet:
    """Test the array-backed frontier."""

    def test_add_ignores_duplicates(self):
        """Adding an item twice keeps one copy."""
        frontier = FrontierSet()
        frontier.add((0, 1))
        frontier.add((0, 1))
        assert len(frontier) == 1

    def test_pop_at_swaps_last_into_place(self):
        """Removing from the middle moves the last item into the gap."""
        frontier = FrontierSet()
        for item in ["a", "b", "c", "d"]:
            frontier.add(item)
        assert frontier.pop_at(1) == "b"
        assert frontier.pop_at(1) == "d"
        assert frontier.pop_at(1) == "c"
        assert frontier.pop_at(0) == "a"
        assert len(frontier) == 0

    def test_pop_last(self):
        """Removing the last item leaves the rest in place."""
        frontier = FrontierSet()
        for item in [1, 2, 3]:
            frontier.add(item)
        assert frontier.pop_at(2) == 3
        assert 3 not in frontier
        assert 1 in frontier and 2 in frontier

    def test_readd_after_pop(self):
        """A removed item can be added again."""
        frontier = FrontierSet()
        frontier.add("x")
        frontier.pop_at(0)
        frontier.add("x")
        assert "x" in frontier


class TestQueenPlacement:
    """Test the marker permutation."""

    def test_is_valid_queens(self):
        """Adjacent columns in consecutive rows are rejected."""
        assert is_valid_queens([0, 2, 4, 1, 3])
        assert not is_valid_queens([0, 1, 3, 5, 2, 4])
        assert not is_valid_queens([0, 2, 4, 3, 1])
        assert is_valid_queens([])

    @pytest.mark.parametrize("size", SIZES)
    def test_assign_queens_is_valid_permutation(self, size):
        """Columns form a permutation with no touching neighbours."""
        columns = assign_queens(size, Draws(create(size).rand))
        assert sorted(columns) == list(range(size))
        assert is_valid_queens(columns)

    def test_assign_queens_deterministic(self):
        """Same stream gives the same placement."""
        first = assign_queens(8, Draws(create(3).rand))
        second = assign_queens(8, Draws(create(3).rand))
        assert first == second


class TestRegionGrowth:
    """Test region growth from fixed marker columns."""

    def test_seed_cells_keep_their_region(self):
        """Row i's marker belongs to region i."""
        columns = [0, 2, 4, 1, 3]
        regions = grow_regions(columns, Draws(create(1).rand))
        for row, col in enumerate(columns):
            assert regions[row][col] == row

    def test_every_cell_assigned(self):
        """No cell is left without a region."""
        columns = [1, 3, 0, 2, 4]
        regions = grow_regions(columns, Draws(create(9).rand))
        assert all(region_id in range(5) for row in regions for region_id in row)

    def test_regions_are_connected(self):
        """Each region is a single 4-connected component."""
        columns = [0, 2, 4, 6, 1, 3, 5]
        regions = grow_regions(columns, Draws(create(77).rand))
        for region_id in range(7):
            coords = [
                (row, col)
                for row in range(7)
                for col in range(7)
                if regions[row][col] == region_id
            ]
            assert is_connected(coords)


class TestGenerateBoard:
    """Test full board generation."""

    @pytest.mark.parametrize("size,seed", board_cases())
    def test_generation_is_pure(self, size, seed):
        """Same size and seed give identical boards."""
        assert generate_board(size, seed) == generate_board(size, seed)

    @pytest.mark.parametrize("size,seed", board_cases())
    def test_one_marker_per_row_and_column(self, size, seed):
        """Markers form a permutation."""
        board = generate_board(size, seed)
        markers = board.markers()
        assert sorted(cell.row for cell in markers) == list(range(size))
        assert sorted(cell.col for cell in markers) == list(range(size))

    @pytest.mark.parametrize("size,seed", board_cases())
    def test_markers_never_touch(self, size, seed):
        """No two markers are neighbours in any of the 8 directions."""
        markers = generate_board(size, seed).markers()
        for i, first in enumerate(markers):
            for second in markers[i + 1:]:
                assert not (abs(first.row - second.row) <= 1 and abs(first.col - second.col) <= 1)

    @pytest.mark.parametrize("size,seed", board_cases())
    def test_regions_partition_board(self, size, seed):
        """Regions cover every cell once, are connected and own one marker."""
        board = generate_board(size, seed)
        regions = list(regions_of(board))

        assert sorted(region.region_id for region in regions) == list(range(size))
        assert sum(len(region) for region in regions) == size * size
        for region in regions:
            assert sum(1 for cell in region.cells if cell.is_marker) == 1
            assert is_connected(region.cell_map.keys())

    def test_cells_know_their_position(self):
        """Each cell stores its own coordinates."""
        board = generate_board(6, 5)
        for row in range(6):
            for col in range(6):
                cell = board.cell(row, col)
                assert (cell.row, cell.col) == (row, col)

    def test_board_records_size_and_seed(self):
        """The board remembers how it was made."""
        board = generate_board(9, 31337)
        assert board.size == 9
        assert board.seed == 31337
        assert len(board.rows) == 9

    def test_different_seeds_differ(self):
        """Boards from different seeds are not all the same."""
        boards = {tuple(map(tuple, generate_board(8, seed).region_grid())) for seed in range(10)}
        assert len(boards) > 1

    def test_board_is_frozen(self):
        """Boards cannot be modified after generation."""
        board = generate_board(5, 1)
        with pytest.raises(ValidationError):
            board.size = 6

    @pytest.mark.parametrize("size", [0, 4, 17, 100, -5])
    def test_invalid_size(self, size):
        """Sizes outside 5..16 are rejected."""
        with pytest.raises(InvalidSize):
            generate_board(size, 0)

    def test_invalid_seed(self):
        """Seeds outside [0, 2**64) are rejected."""
        with pytest.raises(InvalidSeed):
            generate_board(5, -1)
        with pytest.raises(InvalidSeed):
            generate_board(5, 2**64)

    def test_cell_out_of_range(self):
        """Reading outside the grid raises OutOfRange."""
        board = generate_board(5, 0)
        with pytest.raises(OutOfRange):
            board.cell(5, 0)
        with pytest.raises(OutOfRange):
            board.cell(0, -1)


class TestRegionsOf:
    """Test grouping cells by region."""

    def test_first_seen_order(self):
        """Regions come out in the order they appear scanning row-major."""
        board = generate_board(8, 42)
        expected = []
        for cell in board.cells():
            if cell.region_id not in expected:
                expected.append(cell.region_id)
        assert [region.region_id for region in regions_of(board)] == expected

    def test_cell_map_matches_cells(self):
        """Lookup holds exactly the member cells."""
        board = generate_board(7, 8)
        for region in regions_of(board):
            assert list(region.cell_map.values()) == region.cells
            for cell in region.cells:
                assert (cell.row, cell.col) in region
                assert cell.region_id == region.region_id

    def test_restartable(self):
        """Each call enumerates the regions again."""
        board = generate_board(6, 2)
        assert list(regions_of(board)) == list(regions_of(board))
