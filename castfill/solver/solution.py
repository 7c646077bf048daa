"""
Solution Module - Result of strategy computation.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board
from .move import Move


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of boards visited
        dead_ends: Visited boards with no legal moves
        max_depth: Deepest recursion level reached
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    dead_ends: int = 0
    max_depth: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        moves: Moves in play order (empty unless is_complete)
        is_complete: True if the moves solve the board
        was_cancelled: True if stopped by timeout or cancel flag
        metrics: Performance statistics
        board_states: Board before the first move, then after each move
    """
    moves: List[Move] = field(default_factory=list)
    is_complete: bool = False
    was_cancelled: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)
    board_states: List[Board] = field(default_factory=list)

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def final_board(self) -> Optional[Board]:
        """Board after the last move, or None if no replay was recorded."""
        return self.board_states[-1] if self.board_states else None

    def get_board_after_move(self, index: int) -> Board:
        """
        Get board state after executing move at index.

        Args:
            index: Move index (0-based)

        Returns:
            Board after move (index+1 in board_states)

        Raises:
            IndexError: If index out of range
        """
        return self.board_states[index + 1]

    @classmethod
    def replay(cls, board: Board, moves: List[Move]) -> List[Board]:
        """
        Apply moves one by one to a copy of board.

        Args:
            board: Starting board, left unchanged
            moves: Moves in play order

        Returns:
            Starting board copy followed by the board after each move
        """
        states = [board.copy()]
        for move in moves:
            current = states[-1].copy()
            current.apply_move(move)
            states.append(current)
        return states
