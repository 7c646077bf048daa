"""
Move Module - Represents a directional fill from a playable cell.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


# Direction order used by the move generator
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
)

DIRECTION_NAMES: Dict[Tuple[int, int], str] = {
    (1, 0): "right",
    (-1, 0): "left",
    (0, 1): "down",
    (0, -1): "up",
}


@dataclass(frozen=True)
class Move:
    """
    A cast from a playable cell along one axis.

    Applying a move fills the origin and then the next `count` empty
    cells along (dx, dy), stepping over cells that are already filled.

    Attributes:
        x: Origin column
        y: Origin row
        dx: Column step (-1, 0 or 1)
        dy: Row step (-1, 0 or 1)
        count: Empty cells to fill, copied from the origin cell
    """
    x: int
    y: int
    dx: int
    dy: int
    count: int

    def __post_init__(self):
        if (self.dx, self.dy) not in DIRECTION_NAMES:
            raise ValueError(f"Invalid direction: ({self.dx}, {self.dy})")

    @property
    def origin(self) -> Tuple[int, int]:
        """Origin as (x, y)."""
        return (self.x, self.y)

    @property
    def direction(self) -> Tuple[int, int]:
        """Direction as (dx, dy)."""
        return (self.dx, self.dy)

    @property
    def direction_name(self) -> str:
        """Human readable direction (right/left/down/up)."""
        return DIRECTION_NAMES[self.direction]

    def __str__(self) -> str:
        return f"({self.x},{self.y}) {self.direction_name} {self.count}"
