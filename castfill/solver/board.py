"""
Board Module - Grid of cells for the fill puzzle.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, TYPE_CHECKING

from .cell import Cell, CellState, BLOCKED, EMPTY, FILLED, from_hex
from .errors import IllegalMoveError, ParseError
from .rules import is_legal

if TYPE_CHECKING:
    from .move import Move


@dataclass
class Board:
    """
    Mutable board of cells.

    Rows may have different lengths. Every search branch works on its
    own copy, so apply_move mutates in place.

    Attributes:
        grid: List of rows, each a list of Cells
    """
    grid: List[List[Cell]] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> 'Board':
        """
        Parse board text into a Board.

        Each line becomes a row. Digits '1'-'9' and 'a'-'f' are playable
        cells, ' ' is blocked and '.' is empty. A trailing line without a
        final newline is kept as the last row.

        Args:
            text: Board text

        Returns:
            Parsed Board

        Raises:
            ParseError: If text contains any other character
        """
        grid: List[List[Cell]] = []
        row: List[Cell] = []

        for char in text:
            if char == "\n":
                grid.append(row)
                row = []
                continue
            row.append(_parse_cell(char, len(grid), len(row)))

        grid.append(row)
        return cls(grid=grid)

    @classmethod
    def from_rows(cls, rows: List[str]) -> 'Board':
        """
        Create a Board from a list of row strings.

        Args:
            rows: One string per row

        Returns:
            Parsed Board
        """
        return cls.parse("\n".join(rows))

    def copy(self) -> 'Board':
        """Independent copy, safe to mutate without affecting this board."""
        return Board(grid=[list(row) for row in self.grid])

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        """
        Get the cell at column x, row y.

        Args:
            x: Column index, may be negative or past the row end
            y: Row index, may be negative or past the last row

        Returns:
            Cell, or None if (x, y) is off the board
        """
        if 0 <= y < len(self.grid):
            row = self.grid[y]
            if 0 <= x < len(row):
                return row[x]
        return None

    def is_solved(self) -> bool:
        """True if no empty or playable cells remain."""
        for row in self.grid:
            for cell in row:
                if cell.state is CellState.EMPTY or cell.state is CellState.PLAYABLE:
                    return False
        return True

    def apply_move(self, move: 'Move') -> None:
        """
        Apply a move to this board in place.

        Fills the origin, then walks from the origin in the move direction
        filling empty cells until move.count have been filled.

        Args:
            move: Move to apply, must be legal on this board

        Raises:
            IllegalMoveError: If the origin is not a playable cell with
                move.count, or the ray can't reach enough empty cells
        """
        origin = self.cell_at(move.x, move.y)
        if origin is None or origin.state is not CellState.PLAYABLE or origin.count != move.count:
            raise IllegalMoveError(f"Move origin is not a playable {move.count}: {move}")
        if not is_legal(self, move):
            raise IllegalMoveError(f"Tried to make an illegal move: {move}")

        x, y = move.x, move.y
        self.grid[y][x] = FILLED

        filled = 0
        while filled < move.count:
            if self.grid[y][x].state is CellState.EMPTY:
                self.grid[y][x] = FILLED
                filled += 1
            x += move.dx
            y += move.dy

    def playable_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) of every playable cell in row-major order."""
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                if cell.state is CellState.PLAYABLE:
                    yield x, y

    def count_state(self, state: CellState) -> int:
        """Count cells in the given state."""
        return sum(1 for row in self.grid for cell in row if cell.state is state)

    @property
    def rows(self) -> int:
        """Number of rows in board."""
        return len(self.grid)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self.grid), default=0)

    def render(self) -> str:
        """
        Render the board as text.

        Playable cells show their digit, filled cells 'X', empty '.'
        and blocked ' '. Rows are joined by newlines.
        """
        return "\n".join("".join(cell.to_char() for cell in row) for row in self.grid)

    def __str__(self) -> str:
        return self.render()


def _parse_cell(char: str, line: int, column: int) -> Cell:
    """Map one map character to a Cell."""
    if char == " ":
        return BLOCKED
    if char == ".":
        return EMPTY
    try:
        return Cell.playable(from_hex(char))
    except ValueError:
        raise ParseError(char, line, column) from None


def parse(text: str) -> Board:
    """Parse board text. See Board.parse."""
    return Board.parse(text)


def render(board: Board) -> str:
    """Render a board as text. See Board.render."""
    return board.render()
