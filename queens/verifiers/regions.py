"""Grouping board cells by region."""

from typing import Dict, Iterator

from .models import Board, Region


def regions_of(board: Board) -> Iterator[Region]:
    """
    Yield one Region per region id.

    Regions come out in the order their first cell is met scanning the
    board row by row, which is stable for a given board but not sorted by id.
    """
    regions: Dict[int, Region] = {}
    for cell in board.cells():
        region = regions.get(cell.region_id)
        if region is None:
            region = regions[cell.region_id] = Region(region_id=cell.region_id)
        region.add(cell)
    yield from regions.values()
