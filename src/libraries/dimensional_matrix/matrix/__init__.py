"""
Multidimensional matrix modules.
"""

from .multidimensional_matrix import MultidimensionalMatrix, MatrixEntry
from .registry import DimensionKeyRegistry
from .nodes import Branch, Leaf

__all__ = [
    "MultidimensionalMatrix",
    "MatrixEntry",
    "DimensionKeyRegistry",
    "Branch",
    "Leaf"
]
