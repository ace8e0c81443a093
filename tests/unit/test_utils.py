"""
Unit tests for validation utilities.
"""

import pytest

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from libraries.dimensional_matrix.common.utils import (
    validate_index,
    validate_key_tuple,
    validate_dataframe_columns
)
from libraries.dimensional_matrix.common.exceptions import InvalidArgumentError, OutOfRangeError


class TestValidateIndex:
    """Test cases for validate_index."""
    
    def test_valid_index(self):
        """Test indexes inside the bound are returned."""
        assert validate_index(0, 3) == 0
        assert validate_index(2, 3) == 2
    
    @pytest.mark.parametrize("value", [-1, 3, 100])
    def test_out_of_range(self, value):
        """Test indexes outside the bound."""
        with pytest.raises(OutOfRangeError, match="dimension is out of range"):
            validate_index(value, 3, "dimension")
    
    def test_empty_bound(self):
        """Test every index is out of range for an empty bound."""
        with pytest.raises(OutOfRangeError, match="range = 0 - -1"):
            validate_index(0, 0)
    
    @pytest.mark.parametrize("value", ["1", 1.0, None, True])
    def test_not_integer(self, value):
        """Test non-integer indexes are rejected."""
        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            validate_index(value, 3)


class TestValidateKeyTuple:
    """Test cases for validate_key_tuple."""
    
    def test_valid_keys(self):
        """Test valid key sequences come back as tuples."""
        assert validate_key_tuple(["a", 1], 2) == ("a", 1)
        assert validate_key_tuple(("a",), 1) == ("a",)
    
    def test_none_keys(self):
        """Test a missing key tuple."""
        with pytest.raises(InvalidArgumentError, match="keys must not be None") as exc_info:
            validate_key_tuple(None, 2)
        
        assert exc_info.value.argument_name == "keys"
        assert exc_info.value.error_code == "INVALID_ARGUMENT"
    
    def test_length_mismatch(self):
        """Test key tuple of wrong length."""
        with pytest.raises(InvalidArgumentError, match="keys length = 1 must be equals dimension count = 2"):
            validate_key_tuple(("a",), 2)
    
    def test_none_key(self):
        """Test a None key inside the tuple."""
        with pytest.raises(InvalidArgumentError, match=r"keys\[1\] is None"):
            validate_key_tuple(("a", None), 2)
    
    def test_unhashable_key(self):
        """Test an unhashable key inside the tuple."""
        with pytest.raises(InvalidArgumentError, match="hashable"):
            validate_key_tuple(({"a": 1},), 1)


class TestValidateDataframeColumns:
    """Test cases for validate_dataframe_columns."""
    
    def test_all_present(self):
        """Test no missing columns."""
        assert validate_dataframe_columns(["a", "b", "value"], ["a", "value"]) == []
    
    def test_missing_columns(self):
        """Test missing columns are reported in required order."""
        assert validate_dataframe_columns(["a"], ["b", "a", "value"]) == ["b", "value"]
