"""
Rules Module - Move legality and legal move generation.
"""

import logging
from typing import List, TYPE_CHECKING

from .cell import CellState
from .move import DIRECTIONS, Move

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)


def is_legal(board: 'Board', move: Move) -> bool:
    """
    Check whether a move can fill move.count empty cells.

    Walks from one step past the origin. Empty cells count toward the
    total, filled and playable cells are stepped over. A blocked cell
    or the board edge before enough empties are found makes the move
    illegal.

    Args:
        board: Board to check against
        move: Candidate move

    Returns:
        True if the move is legal
    """
    x = move.x + move.dx
    y = move.y + move.dy
    empties = 0

    while empties < move.count:
        cell = board.cell_at(x, y)
        if cell is None or cell.state is CellState.BLOCKED:
            return False
        if cell.state is CellState.EMPTY:
            empties += 1
        x += move.dx
        y += move.dy

    return True


def legal_moves(board: 'Board') -> List[Move]:
    """
    Find every legal move on the board.

    Cells are scanned in row-major order and each playable cell tries
    right, left, down, up in that order. If any playable cell has no
    legal direction the board cannot be completed and an empty list
    is returned.

    Args:
        board: Current board

    Returns:
        Legal moves in generation order, or [] on a dead end
    """
    moves: List[Move] = []

    for x, y in board.playable_cells():
        count = board.cell_at(x, y).count
        found = False

        for dx, dy in DIRECTIONS:
            move = Move(x=x, y=y, dx=dx, dy=dy, count=count)
            if is_legal(board, move):
                moves.append(move)
                found = True

        if not found:
            logger.debug(f"Dead end: cell ({x},{y}) with count {count} has no legal move")
            return []

    # TODO: detect empty cells no playable cell can reach and return [] for those too
    return moves
