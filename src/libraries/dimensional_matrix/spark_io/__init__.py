"""
Spark DataFrame import and export for matrices.
"""

from .frame_bridge import MatrixFrameBridge

__all__ = [
    "MatrixFrameBridge"
]
