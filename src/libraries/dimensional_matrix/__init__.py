"""
Dimensional Matrix Library

A sparse, N-dimensional associative container that maps one key per
dimension to a value while tracking the distinct keys seen in every
dimension.

Main Components:
- MultidimensionalMatrix: Key tuple to value storage with per-dimension key registries
- MatrixEntry: One key combination and its value
- MatrixFrameBridge: Exports matrices to and loads them from Spark DataFrames

Author: Data Engineering Team
Version: 1.0.0
"""

from .matrix.multidimensional_matrix import MultidimensionalMatrix, MatrixEntry
from .common.config import MatrixConfig, FrameConfig, MatrixMetrics
from .common.exceptions import (
    DimensionalMatrixError,
    InvalidArgumentError,
    OutOfRangeError,
    ConfigurationError,
    FrameBridgeError
)

__version__ = "1.0.0"
__author__ = "Data Engineering Team"

__all__ = [
    "MultidimensionalMatrix",
    "MatrixEntry",
    "MatrixConfig",
    "FrameConfig",
    "MatrixMetrics",
    "DimensionalMatrixError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "ConfigurationError",
    "FrameBridgeError"
]
