"""
Solver Errors - Exceptions raised by the board model and move applier.
"""


class ParseError(ValueError):
    """
    Board text contained a character that is not part of the map format.

    Recoverable: callers should report it and stop, the engine never
    sees a partially parsed board.

    Attributes:
        char: The offending character
        line: Zero-based row index where it appeared
        column: Zero-based column index within that row
    """

    def __init__(self, char: str, line: int, column: int):
        self.char = char
        self.line = line
        self.column = column
        super().__init__(
            f"Couldn't parse {char!r} as a cell (line {line + 1}, column {column + 1})"
        )


class IllegalMoveError(RuntimeError):
    """Tried to apply a move that is not legal on the current board."""
