import logging
from typing import Dict, Iterator, List, Tuple

from .board import (
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    HEIGHT,
    SIZE,
    START_INDEX,
    TOP_LEFT,
    TOP_RIGHT,
    WIDTH,
)

LOG = logging.getLogger(__name__)

# ----------------------------
# Moves
# ----------------------------

STAY = 0
N = -WIDTH
S = WIDTH
E = 1
W = -1
NE = -WIDTH + 1
NW = -WIDTH - 1
SE = WIDTH + 1
SW = WIDTH - 1

# Offsets for direction codes 0..3, per zone of the board.
STEP_TABLE: Dict[str, Tuple[int, int, int, int]] = {
    "top-left": (STAY, E, S, SE),
    "top-right": (W, STAY, SW, S),
    "bottom-left": (N, NE, STAY, E),
    "bottom-right": (NW, N, W, STAY),
    "top": (W, E, SW, SE),
    "bottom": (NW, NE, W, E),
    "right": (NW, N, SW, S),
    "left": (N, NE, S, SE),
    "interior": (NW, NE, SW, SE),
}

CORNERS = {
    TOP_LEFT: "top-left",
    TOP_RIGHT: "top-right",
    BOTTOM_LEFT: "bottom-left",
    BOTTOM_RIGHT: "bottom-right",
}


def zone_of(index: int) -> str:
    """Classify a board index; corners win over the edges they sit on."""
    if not (0 <= index < SIZE):
        raise ValueError(f"improper index {index!r}")
    if index in CORNERS:
        return CORNERS[index]
    x, y = index % WIDTH, index // WIDTH
    if y == 0:
        return "top"
    if y == HEIGHT - 1:
        return "bottom"
    if x == WIDTH - 1:
        return "right"
    if x == 0:
        return "left"
    return "interior"


def next_step(index: int, code: int) -> int:
    """
    Given a current index and a direction code (0-3), return the index to
    which the bishop steps. Moves that would leave the board slide along the
    wall, or stay put in a corner.
    """
    if code not in (0, 1, 2, 3):
        raise ValueError(f"improper direction {code!r}")
    return index + STEP_TABLE[zone_of(index)][code]


# ----------------------------
# Walk
# ----------------------------

def direction_codes(data: bytes) -> Iterator[int]:
    """Each byte => 4 moves, 2 bits per move, low bits first."""
    for byte in data:
        for _ in range(4):
            yield byte & 0x3
            byte >>= 2


def walk(data: bytes, start: int = START_INDEX) -> List[int]:
    """Positions visited after each move; the start position is not included."""
    pos = start
    steps: List[int] = []
    for code in direction_codes(data):
        pos = next_step(pos, code)
        steps.append(pos)
    LOG.debug("walked %d steps from %d to %d", len(steps), start, pos)
    return steps


def trace(data: bytes) -> List[int]:
    return [START_INDEX] + walk(data)
