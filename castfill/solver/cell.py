"""
Cell Module - Single grid position and its state.
"""

from dataclasses import dataclass
from enum import Enum


# Digit for each playable count, index 0 -> count 1
HEX_DIGITS = "123456789abcdefg"

MIN_COUNT = 1
MAX_COUNT = 16


class CellState(Enum):
    """State of a single board cell."""
    BLOCKED = "blocked"
    EMPTY = "empty"
    FILLED = "filled"
    PLAYABLE = "playable"


def from_hex(char: str) -> int:
    """
    Convert a playable digit to its count.

    Args:
        char: One of '1'-'9' or 'a'-'f'

    Returns:
        Count in range 1-15

    Raises:
        ValueError: If char is not a playable digit
    """
    if len(char) == 1 and char in HEX_DIGITS[:15]:
        return HEX_DIGITS.index(char) + 1
    raise ValueError(f"Not a playable digit: {char!r}")


def to_hex(count: int) -> str:
    """Convert a count in range 1-16 to its display digit."""
    if not MIN_COUNT <= count <= MAX_COUNT:
        raise ValueError(f"Count out of range 1-16: {count}")
    return HEX_DIGITS[count - 1]


@dataclass(frozen=True)
class Cell:
    """
    Immutable cell value.

    Cells are replaced rather than modified, so copying a board only
    needs to duplicate its row lists.

    Attributes:
        state: Current cell state
        count: Cells a move from here must fill (PLAYABLE only, else 0)
    """
    state: CellState
    count: int = 0

    def __post_init__(self):
        if self.state is CellState.PLAYABLE:
            if not MIN_COUNT <= self.count <= MAX_COUNT:
                raise ValueError(f"Playable count out of range 1-16: {self.count}")
        elif self.count != 0:
            raise ValueError(f"{self.state.name} cell must have count 0, got {self.count}")

    @classmethod
    def playable(cls, count: int) -> 'Cell':
        """Create a playable cell with the given count."""
        return cls(CellState.PLAYABLE, count)

    @property
    def is_playable(self) -> bool:
        return self.state is CellState.PLAYABLE

    @property
    def is_empty(self) -> bool:
        return self.state is CellState.EMPTY

    def to_char(self) -> str:
        """Display character for this cell."""
        if self.state is CellState.PLAYABLE:
            return to_hex(self.count)
        return _STATE_CHARS[self.state]


# Shared instances for the count-less states
BLOCKED = Cell(CellState.BLOCKED)
EMPTY = Cell(CellState.EMPTY)
FILLED = Cell(CellState.FILLED)

FILLED_MARKER = "X"

_STATE_CHARS = {
    CellState.BLOCKED: " ",
    CellState.EMPTY: ".",
    CellState.FILLED: FILLED_MARKER,
}
