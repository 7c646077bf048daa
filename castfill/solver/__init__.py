"""
Solver Package - Solving engine for the line fill puzzle.

A board holds blocked, empty and numbered cells. A move picks a numbered
cell and a direction and fills that many empty cells along the ray,
stepping over cells that are already filled. The board is solved when
no empty or numbered cells remain.

Public API:
    - Board: Mutable grid of cells, parse() / render() / apply_move()
    - Cell, CellState: Single grid position
    - Move: Directional fill from a numbered cell
    - is_legal(), legal_moves(): Move rules
    - solve(): Backtracking search, moves in play order or None
    - Solution, SolutionMetrics, SolutionContext: Strategy results and context
    - SolverStrategy, create_strategy(), ...: Strategy framework
    - ParseError, IllegalMoveError: Error types

Usage:
    from castfill.solver import parse, solve

    board = parse("1.\\n1.\\n.1")
    moves = solve(board)
    if moves is None:
        print("No solution")
    for move in moves or []:
        print(move)
"""

# Core data structures
from .cell import Cell, CellState
from .board import Board, parse, render
from .move import Move, DIRECTIONS
from .rules import is_legal, legal_moves
from .errors import ParseError, IllegalMoveError
from .solution import Solution, SolutionMetrics
from .context import SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    run_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies
from .strategies import solve

__all__ = [
    # Data structures
    "Board",
    "Cell",
    "CellState",
    "Move",
    "DIRECTIONS",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    # Engine
    "parse",
    "render",
    "is_legal",
    "legal_moves",
    "solve",
    # Errors
    "ParseError",
    "IllegalMoveError",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "run_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
]
