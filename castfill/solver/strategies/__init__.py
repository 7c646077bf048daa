"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .backtracking import BacktrackingStrategy, solve

__all__ = [
    "BacktrackingStrategy",
    "solve",
]
