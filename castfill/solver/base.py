"""
Base Strategy Module - Abstract base class for solving strategies.
"""

from abc import ABC, abstractmethod
from typing import List

from .board import Board
from .move import Move
from .context import SolutionContext
from .solution import Solution
from .rules import legal_moves


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute solution for the given board.

        Should periodically check context.is_cancelled() and stop
        with was_cancelled set if True.

        Args:
            context: Solution context with board, cancellation, progress

        Returns:
            Solution with moves and metrics
        """
        pass

    def find_all_valid_moves(self, board: Board) -> List[Move]:
        """
        Find all legal moves on the board.

        Args:
            board: Current board

        Returns:
            List of legal Move objects, empty on a dead end
        """
        return legal_moves(board)

    def _check_cancelled(self, context: SolutionContext) -> bool:
        """Convenience method to check cancellation."""
        return context.is_cancelled()
