import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from .board import HEIGHT, SIZE, WIDTH, coords_to_index

LOG = logging.getLogger(__name__)

GLYPHS = " .o+=*BOX@%&#/^"
# Index 14 ("^") stays in the table but the tally stops one short of it.
MAX_VISITS = len(GLYPHS) - 2

START = "S"
END = "E"

Cell = Union[int, str]


@dataclass(frozen=True)
class Grid:
    cells: Tuple[Cell, ...]
    start: int
    end: int

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def at(self, x: int, y: int) -> Cell:
        return self.cells[coords_to_index(x, y)]

    def visits(self, index: int) -> int:
        """Visit count of a cell; 0 for the start and end markers."""
        cell = self.cells[index]
        return cell if isinstance(cell, int) else 0

    def symbol(self, index: int) -> str:
        cell = self.cells[index]
        if isinstance(cell, int):
            return GLYPHS[cell]
        return cell

    def rows(self) -> List[str]:
        return [
            "".join(self.symbol(x + WIDTH * y) for x in range(WIDTH))
            for y in range(HEIGHT)
        ]


def accumulate(trace: Sequence[int]) -> Grid:
    """
    Tally a walk trace onto the board.

    The first position is marked START and the last END; the END mark is
    written second, so it replaces START when the two coincide. Positions in
    between each add one visit to their cell, up to MAX_VISITS. Marked cells
    are never tallied.
    """
    if not trace:
        raise ValueError("empty walk trace")
    for i in trace:
        if not 0 <= i < SIZE:
            raise ValueError(f"improper index {i!r}")

    start, finish = trace[0], trace[-1]
    cells: List[Cell] = [0] * SIZE
    cells[start] = START
    cells[finish] = END

    for i in trace[1:-1]:
        was = cells[i]
        if isinstance(was, int) and was < MAX_VISITS:
            cells[i] = was + 1

    LOG.debug("accumulated %d visits, start=%d end=%d", max(len(trace) - 2, 0), start, finish)
    return Grid(cells=tuple(cells), start=start, end=finish)
