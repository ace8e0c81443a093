"""
Common utilities and configurations for dimensional matrix library.
"""

from .config import MatrixConfig, FrameConfig, MatrixMetrics
from .exceptions import (
    DimensionalMatrixError,
    InvalidArgumentError,
    OutOfRangeError,
    ConfigurationError,
    FrameBridgeError
)
from .utils import validate_index, validate_key_tuple, validate_dataframe_columns

__all__ = [
    "MatrixConfig",
    "FrameConfig",
    "MatrixMetrics",
    "DimensionalMatrixError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "ConfigurationError",
    "FrameBridgeError",
    "validate_index",
    "validate_key_tuple",
    "validate_dataframe_columns"
]
