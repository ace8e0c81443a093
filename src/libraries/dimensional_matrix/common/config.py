"""
Configuration classes for dimensional matrix library.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Callable

from .exceptions import ConfigurationError


@dataclass
class MatrixConfig:
    """Configuration for a multidimensional matrix."""
    
    # Required parameters
    dimension_count: int
    
    # Optional parameters
    comparator: Optional[Callable[[Any, Any], int]] = None
    dimension_names: Optional[List[str]] = None
    
    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.dimension_count, bool) or not isinstance(self.dimension_count, int):
            raise ConfigurationError("dimension_count must be an integer", "dimension_count")
        if self.dimension_count < 1:
            raise ConfigurationError(
                f"The minimum value of dimension_count is 1, input = {self.dimension_count}",
                "dimension_count"
            )
        if self.comparator is not None and not callable(self.comparator):
            raise ConfigurationError("comparator must be callable", "comparator")
        if self.dimension_names is not None:
            if len(self.dimension_names) != self.dimension_count:
                raise ConfigurationError(
                    f"dimension_names length = {len(self.dimension_names)} must be equals "
                    f"dimension_count = {self.dimension_count}",
                    "dimension_names"
                )
            if len(set(self.dimension_names)) != len(self.dimension_names):
                raise ConfigurationError("dimension_names must be unique", "dimension_names")


@dataclass
class FrameConfig:
    """Configuration for moving a matrix to and from a DataFrame."""
    
    # Required parameters
    dimension_columns: List[str]
    
    # Standard column names
    value_column: str = "value"
    
    # Export behaviour
    include_absent: bool = False
    
    # Ordering for matrices built from a DataFrame
    comparator: Optional[Callable[[Any, Any], int]] = None
    
    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.dimension_columns:
            raise ConfigurationError("dimension_columns cannot be empty", "dimension_columns")
        if not self.value_column:
            raise ConfigurationError("value_column is required", "value_column")
        if len(set(self.dimension_columns)) != len(self.dimension_columns):
            raise ConfigurationError("dimension_columns must be unique", "dimension_columns")
        if self.value_column in self.dimension_columns:
            raise ConfigurationError(
                f"value_column '{self.value_column}' clashes with a dimension column",
                "value_column"
            )
    
    @classmethod
    def for_matrix(cls, matrix: Any, value_column: str = "value",
                   include_absent: bool = False) -> "FrameConfig":
        """
        Build a frame configuration from a labelled matrix.

        Args:
            matrix: Matrix created with dimension_names
            value_column: Name of the value column
            include_absent: Whether to export combinations without a value

        Returns:
            FrameConfig using the matrix's dimension names and comparator
        """
        if matrix.dimension_names is None:
            raise ConfigurationError(
                "matrix has no dimension_names to use as dimension_columns",
                "dimension_columns"
            )
        return cls(
            dimension_columns=list(matrix.dimension_names),
            value_column=value_column,
            include_absent=include_absent,
            comparator=matrix.comparator
        )

    @property
    def all_columns(self) -> List[str]:
        """Dimension columns followed by the value column."""
        return list(self.dimension_columns) + [self.value_column]


@dataclass
class MatrixMetrics:
    """Size metrics for a multidimensional matrix."""
    
    dimension_count: int = 0
    key_counts: List[int] = field(default_factory=list)
    combination_count: int = 0
    stored_value_count: int = 0
    is_sorted: bool = False
    
    @property
    def fill_ratio(self) -> float:
        """Share of combinations that hold a stored value."""
        if self.combination_count == 0:
            return 0.0
        return self.stored_value_count / self.combination_count
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary."""
        return {
            "dimension_count": self.dimension_count,
            "key_counts": list(self.key_counts),
            "combination_count": self.combination_count,
            "stored_value_count": self.stored_value_count,
            "fill_ratio": self.fill_ratio,
            "is_sorted": self.is_sorted
        }
