"""
Adapters package - External service connections.
"""

from adapters import mealdb_adapter

__all__ = [
    "mealdb_adapter",
]
