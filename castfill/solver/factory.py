"""
Strategy Factory Module - Registry of solving strategies.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Type

from .base import SolverStrategy
from .board import Board
from .context import SolutionContext
from .solution import Solution

logger = logging.getLogger(__name__)

# Strategy classes by name
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

DEFAULT_STRATEGY = "backtrack"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Decorator to register a strategy class under its name.

    Usage:
        @register_strategy
        class MyStrategy(SolverStrategy):
            name = "my_strategy"
            ...

    Raises:
        ValueError: If another class already uses the name
    """
    existing = _STRATEGIES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Strategy name {cls.name!r} already used by {existing.__name__}")
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Registered strategy name
        **kwargs: Passed to the strategy constructor

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def run_strategy(
    name: str,
    board: Board,
    timeout_sec: Optional[float] = None,
    progress_callback: Optional[Callable[[float, str], None]] = None
) -> Solution:
    """
    Solve a board with the named strategy.

    Args:
        name: Registered strategy name
        board: Board to solve, left unchanged
        timeout_sec: Give up after this many seconds, None for no limit
        progress_callback: Receives (fraction, message) updates

    Returns:
        Solution from the strategy

    Raises:
        ValueError: If strategy name not found
    """
    strategy = create_strategy(name)
    context = SolutionContext(
        board=board,
        timeout_sec=timeout_sec,
        progress_callback=progress_callback,
    )
    logger.debug(f"Running strategy {name!r} (timeout: {timeout_sec})")
    return strategy.solve(context)


def get_strategy_names() -> List[str]:
    """Registered strategy names in registration order."""
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """Name and description of every registered strategy."""
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """The backtracking strategy if registered, else the first one, else ""."""
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")
