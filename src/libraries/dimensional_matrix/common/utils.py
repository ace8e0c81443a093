"""
Utility functions for dimensional matrix library.
"""

from typing import Any, List, Sequence, Tuple
import logging

from .exceptions import InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)


def validate_index(value: Any, bound: int, name: str = "index") -> int:
    """
    Validate that a value is an integer in [0, bound).
    
    Args:
        value: Index to check
        bound: Exclusive upper bound
        name: Argument name used in error messages
        
    Returns:
        The validated index
        
    Raises:
        InvalidArgumentError: If value is not an integer
        OutOfRangeError: If value is outside [0, bound)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}", name)
    if not (-1 < value < bound):
        raise OutOfRangeError(
            f"{name} is out of range, {name} = {value}, {name} range = 0 - {bound - 1}",
            value, bound
        )
    return value


def validate_key_tuple(keys: Sequence[Any], dimension_count: int,
                       name: str = "keys") -> Tuple[Any, ...]:
    """
    Validate a key tuple against the dimension count.
    
    Args:
        keys: One key per dimension
        dimension_count: Expected tuple length
        name: Argument name used in error messages
        
    Returns:
        The keys as a tuple
        
    Raises:
        InvalidArgumentError: If keys is None, has the wrong length or holds a
            None or unhashable key
    """
    if keys is None:
        raise InvalidArgumentError(f"{name} must not be None", name)
    keys = tuple(keys)
    if len(keys) != dimension_count:
        raise InvalidArgumentError(
            f"{name} length = {len(keys)} must be equals dimension count = {dimension_count}",
            name
        )
    for position, key in enumerate(keys):
        if key is None:
            raise InvalidArgumentError(f"Key must not be None, {name}[{position}] is None", name)
        try:
            hash(key)
        except TypeError:
            raise InvalidArgumentError(
                f"Key must be hashable, {name}[{position}] is {type(key).__name__}", name
            )
    return keys


def validate_dataframe_columns(columns: Sequence[str], required_columns: List[str]) -> List[str]:
    """
    Return the required columns missing from a DataFrame column list.
    
    Args:
        columns: Columns present in the DataFrame
        required_columns: List of required column names
        
    Returns:
        Missing column names in required order, empty if all exist
    """
    existing_columns = set(columns)
    missing_columns = [c for c in required_columns if c not in existing_columns]
    
    if missing_columns:
        logger.error(f"Missing required columns: {missing_columns}")
    
    return missing_columns
