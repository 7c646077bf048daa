"""
Backtracking Strategy - Depth-first search for the first full solution.

Every playable cell must be used exactly once, so the search depth is
bounded by the number of playable cells on the initial board. Each level
works on its own copy of the board; discarding a branch is just dropping
that copy.
"""

import sys
import time
import logging
from typing import List, Optional

from ..base import SolverStrategy
from ..board import Board
from ..cell import CellState
from ..move import Move
from ..context import SolutionContext
from ..solution import Solution, SolutionMetrics
from ..factory import register_strategy

logger = logging.getLogger(__name__)

# Stack frames kept free for callers and helpers below the search
RECURSION_HEADROOM = 500


class _SearchCancelled(Exception):
    """Unwinds the search when the context reports cancellation."""


@register_strategy
class BacktrackingStrategy(SolverStrategy):
    """
    Exhaustive depth-first search.

    Algorithm:
        1. If the board is solved, succeed with no further moves
        2. Generate legal moves; none on an unsolved board is a dead end
        3. For each move in generation order, apply it to a copy of
           the board and recurse
        4. The first branch that solves the board wins, siblings are
           not explored

    Move order is the generator's order (row-major cells, then right,
    left, down, up), so the same board always yields the same solution.
    """
    name = "backtrack"
    description = "Backtracking (exhaustive) - First solution found depth-first"

    # Recursion levels that log progress
    progress_depth = 2

    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for a move sequence that solves the board.

        Args:
            context: Solution context with board and cancellation

        Returns:
            Solution with moves in play order. is_complete is False if the
            board has no solution or the search was cancelled.
        """
        start_time = time.perf_counter()
        metrics = SolutionMetrics(strategy_name=self.name)
        board = context.board

        previous_limit = _ensure_recursion_limit(board)
        logger.info(
            f"Solving {board.rows}-row board, "
            f"{board.count_state(CellState.PLAYABLE)} playable, "
            f"{board.count_state(CellState.EMPTY)} empty"
        )

        try:
            found = self._search(board, 0, context, metrics)
        except _SearchCancelled:
            logger.warning(
                f"Search cancelled after {metrics.states_explored} states "
                f"({context.elapsed_time():.1f}s)"
            )
            return self._build_solution(board, None, metrics, start_time, was_cancelled=True)
        finally:
            sys.setrecursionlimit(previous_limit)

        if found is not None:
            found.reverse()

        return self._build_solution(board, found, metrics, start_time, was_cancelled=False)

    def _search(
        self,
        board: Board,
        depth: int,
        context: SolutionContext,
        metrics: SolutionMetrics
    ) -> Optional[List[Move]]:
        """
        Recursive search step.

        Returns:
            Moves from this board to the solved board in reverse play
            order, or None if this branch has no solution
        """
        if self._check_cancelled(context):
            raise _SearchCancelled()

        metrics.states_explored += 1
        metrics.max_depth = max(metrics.max_depth, depth)

        if board.is_solved():
            return []

        moves = self.find_all_valid_moves(board)
        if not moves:
            metrics.dead_ends += 1
            return None

        for i, move in enumerate(moves):
            if depth < self.progress_depth:
                logger.debug(f"{' ' * depth}{i}/{len(moves)}")
                if depth == 0:
                    context.report_progress(i / len(moves), f"Trying {move}")

            branch = board.copy()
            branch.apply_move(move)

            solution = self._search(branch, depth + 1, context, metrics)
            if solution is not None:
                solution.append(move)
                return solution

        return None

    def _build_solution(
        self,
        board: Board,
        moves: Optional[List[Move]],
        metrics: SolutionMetrics,
        start_time: float,
        was_cancelled: bool
    ) -> Solution:
        """Build Solution object from search results."""
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000

        if moves is None:
            if not was_cancelled:
                logger.info(
                    f"No solution: {metrics.states_explored} states, "
                    f"{metrics.dead_ends} dead ends, {metrics.computation_time_ms:.1f}ms"
                )
            return Solution(was_cancelled=was_cancelled, metrics=metrics)

        logger.info(
            f"Solved in {len(moves)} moves: {metrics.states_explored} states, "
            f"{metrics.dead_ends} dead ends, {metrics.computation_time_ms:.1f}ms"
        )
        return Solution(
            moves=moves,
            is_complete=True,
            metrics=metrics,
            board_states=Solution.replay(board, moves),
        )


def _ensure_recursion_limit(board: Board) -> int:
    """
    Raise the interpreter recursion limit to fit one frame per playable cell.

    Returns:
        The limit before the call, for the caller to restore
    """
    previous = sys.getrecursionlimit()
    needed = board.count_state(CellState.PLAYABLE) + RECURSION_HEADROOM
    if previous < needed:
        logger.debug(f"Raising recursion limit to {needed}")
        sys.setrecursionlimit(needed)
    return previous


def solve(board: Board) -> Optional[List[Move]]:
    """
    Solve a board with the backtracking strategy.

    Args:
        board: Board to solve, left unchanged

    Returns:
        Moves in play order, [] if already solved, None if unsolvable
    """
    solution = BacktrackingStrategy().solve(SolutionContext(board=board))
    return solution.moves if solution.is_complete else None
