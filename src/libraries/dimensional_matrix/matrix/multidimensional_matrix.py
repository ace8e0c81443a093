"""
Sparse N-dimensional matrix with per-dimension key registries.
"""

from dataclasses import dataclass
from math import prod
from typing import Any, Callable, List, Optional, Sequence, Tuple
import logging

from ..common.config import MatrixConfig, MatrixMetrics
from ..common.exceptions import InvalidArgumentError
from ..common.utils import validate_index, validate_key_tuple
from .nodes import Branch
from .registry import DimensionKeyRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatrixEntry:
    """One combination of dimension keys and the value stored there (None if unset)."""
    
    keys: Tuple[Any, ...]
    value: Any = None
    
    def __str__(self) -> str:
        return f"[{', '.join(str(k) for k in self.keys)}] {self.value}"


class MultidimensionalMatrix:
    """
    Sparse matrix addressed by one key per dimension.
    
    Values live in a tree of ``Branch`` nodes whose depth equals the dimension
    count. Alongside the tree every dimension keeps a registry of the distinct
    keys seen so far, in insertion order or sorted by the active comparator.
    Setting a value to None removes it; removal never drops keys from the
    registries, so ``key_count`` only grows until ``clear`` is called.
    
    Not thread safe. Callers that share an instance must serialize access.
    """
    
    def __init__(self, dimension_count: int,
                 comparator: Optional[Callable[[Any, Any], int]] = None,
                 dimension_names: Optional[Sequence[str]] = None):
        """
        Initialize an empty matrix.
        
        Args:
            dimension_count: Number of dimensions, at least 1
            comparator: Optional cmp-style function used to keep every
                dimension's keys sorted
            dimension_names: Optional label per dimension, used as column
                names on export
                
        Raises:
            InvalidArgumentError: If dimension_count is below 1, comparator is not
                callable or dimension_names do not match the dimension count
        """
        if isinstance(dimension_count, bool) or not isinstance(dimension_count, int):
            raise InvalidArgumentError("dimension_count must be an integer", "dimension_count")
        if dimension_count < 1:
            raise InvalidArgumentError(
                f"The minimum value of dimension_count is 1, input = {dimension_count}",
                "dimension_count"
            )
        if comparator is not None and not callable(comparator):
            raise InvalidArgumentError("comparator must be callable", "comparator")
        if dimension_names is not None:
            dimension_names = tuple(dimension_names)
            if len(dimension_names) != dimension_count:
                raise InvalidArgumentError(
                    f"dimension_names length = {len(dimension_names)} must be equals "
                    f"dimension count = {dimension_count}",
                    "dimension_names"
                )
            if len(set(dimension_names)) != len(dimension_names):
                raise InvalidArgumentError("dimension_names must be unique", "dimension_names")
        
        self._dimension_count = dimension_count
        self._dimension_names = dimension_names
        self._comparator = comparator
        self._registries = [DimensionKeyRegistry(d) for d in range(dimension_count)]
        self._root = Branch()
        
        logger.info(f"Initialized MultidimensionalMatrix with {dimension_count} dimensions "
                    f"(sorted: {comparator is not None})")
    
    @classmethod
    def from_config(cls, config: MatrixConfig) -> "MultidimensionalMatrix":
        """Create a matrix from a MatrixConfig."""
        return cls(config.dimension_count, config.comparator, config.dimension_names)
    
    def __repr__(self) -> str:
        key_counts = [len(registry) for registry in self._registries]
        return (f"MultidimensionalMatrix(dimension_count={self._dimension_count}, "
                f"key_counts={key_counts}, sorted={self.is_sorted()})")
    
    # Dimension introspection
    
    @property
    def dimension_count(self) -> int:
        return self._dimension_count
    
    @property
    def dimension_names(self) -> Optional[Tuple[str, ...]]:
        """Label per dimension, or None when the matrix is unlabelled."""
        return self._dimension_names
    
    @property
    def comparator(self) -> Optional[Callable[[Any, Any], int]]:
        return self._comparator
    
    def get_dimension_count(self) -> int:
        """Returns how many dimensions this matrix has."""
        return self._dimension_count
    
    def is_sorted(self) -> bool:
        """Returns True if the dimension keys are kept sorted by a comparator."""
        return self._comparator is not None
    
    def set_comparator(self, comparator: Optional[Callable[[Any, Any], int]]) -> None:
        """
        Replace the comparator and re-sort every dimension's keys.
        
        Passing None stops sorting; the current key order is kept as it is.
        If the comparator raises, neither the key order nor the active
        comparator changes.

        Args:
            comparator: cmp-style function or None
        """
        if comparator is not None and not callable(comparator):
            raise InvalidArgumentError("comparator must be callable", "comparator")
        
        if comparator is not None:
            resorted = [registry.sorted_keys(comparator) for registry in self._registries]
            for registry, keys in zip(self._registries, resorted):
                registry.commit(keys)
        self._comparator = comparator

        logger.info(f"Comparator replaced (sorted: {comparator is not None})")
    
    def key_count(self, dimension: int) -> int:
        """
        Returns how many keys the given dimension has.
        
        Raises:
            OutOfRangeError: If dimension is not in [0, dimension_count)
        """
        return len(self._registry(dimension))
    
    def key_at(self, dimension: int, index: int) -> Any:
        """
        Returns the key of the dimension at the given position.
        
        Raises:
            OutOfRangeError: If dimension or index is out of range
        """
        registry = self._registry(dimension)
        validate_index(index, len(registry), "index")
        return registry.key_at(index)
    
    def index_of(self, dimension: int, key: Any) -> int:
        """
        Returns the position of key in the dimension, or -1 if it is not registered.
        
        Raises:
            OutOfRangeError: If dimension is out of range
            InvalidArgumentError: If key is None
        """
        registry = self._registry(dimension)
        if key is None:
            raise InvalidArgumentError("Key must not be None", "key")
        return registry.index_of(key)
    
    def keys_of(self, dimension: int) -> Tuple[Any, ...]:
        """
        Returns a snapshot of all keys of the dimension in current order.
        
        Raises:
            OutOfRangeError: If dimension is out of range
        """
        return self._registry(dimension).snapshot()
    
    # Value access
    
    def get_value_by_index(self, *indexes: int) -> Any:
        """
        Returns the value at the given key positions, or None if nothing is stored there.
        
        Args:
            indexes: One registry position per dimension
            
        Raises:
            InvalidArgumentError: If the number of indexes differs from dimension_count
            OutOfRangeError: If a position is outside its dimension's registry
        """
        if len(indexes) != self._dimension_count:
            raise InvalidArgumentError(
                f"indexes length = {len(indexes)} must be equals dimension count = "
                f"{self._dimension_count}",
                "indexes"
            )
        keys = tuple(self.key_at(dimension, index) for dimension, index in enumerate(indexes))
        return self._lookup(keys)
    
    def get_value_by_key(self, *keys: Any) -> Any:
        """
        Returns the value stored under the key tuple, or None if there is none.
        
        Raises:
            InvalidArgumentError: If the number of keys differs from dimension_count
                or a key is None
        """
        keys = validate_key_tuple(keys, self._dimension_count)
        return self._lookup(keys)
    
    def set_value(self, value: Any, *keys: Any) -> None:
        """
        Store value under the key tuple, registering every key on the way.

        A None value removes the entry instead; see remove_value. New keys are
        sorted before anything is stored, so a comparator that raises leaves
        the matrix unchanged.
        
        Args:
            value: Value to store, or None to remove
            keys: One key per dimension
            
        Raises:
            InvalidArgumentError: If the number of keys differs from dimension_count
                or a key is None
        """
        keys = validate_key_tuple(keys, self._dimension_count)
        
        if value is None:
            self._remove(keys)
            return
        
        # Comparator calls happen while staging, before the tree is touched
        staged = [registry.stage(key, self._comparator)
                  for registry, key in zip(self._registries, keys)]

        branch = self._root
        for key in keys[:-1]:
            branch = branch.ensure_branch(key)
        branch.put_leaf(keys[-1], value)

        for registry, key, staged_keys in zip(self._registries, keys, staged):
            if staged_keys is not None:
                registry.commit(staged_keys)
                logger.debug(f"Registered key {key!r} in dimension {registry.dimension}")

        logger.debug(f"Set value at {keys}")
    
    def remove_value(self, *keys: Any) -> None:
        """
        Remove the value stored under the key tuple.
        
        Registered keys stay registered and emptied branches are kept, so
        key_count and get_combinations still report the removed keys.
        
        Raises:
            InvalidArgumentError: If the number of keys differs from dimension_count
                or a key is None
        """
        self.set_value(None, *keys)
    
    def clear(self) -> None:
        """Remove all values and registered keys. Dimension count and comparator stay."""
        self._root.clear()
        for registry in self._registries:
            registry.clear()
        
        logger.info("Cleared all matrix values and dimension keys")
    
    # Enumeration
    
    def get_combinations(self) -> List[MatrixEntry]:
        """
        Build every combination of registered keys with its value.
        
        Dimension 0 is the outermost loop and the last dimension the innermost.
        Combinations without a stored value are included with value None. The
        result size is the product of all key counts.
        
        Returns:
            List of MatrixEntry in row-major order
        """
        dimension_keys = [registry.snapshot() for registry in self._registries]
        if any(len(keys) == 0 for keys in dimension_keys):
            return []
        
        combinations = []
        positions = [0] * self._dimension_count
        while True:
            keys = tuple(dimension_keys[d][p] for d, p in enumerate(positions))
            combinations.append(MatrixEntry(keys, self._lookup(keys)))
            
            # Advance the innermost dimension, carrying outward
            dimension = self._dimension_count - 1
            while dimension >= 0:
                positions[dimension] += 1
                if positions[dimension] < len(dimension_keys[dimension]):
                    break
                positions[dimension] = 0
                dimension -= 1
            if dimension < 0:
                break
        
        logger.debug(f"Built {len(combinations)} combinations")
        return combinations
    
    def get_matrix_metrics(self) -> MatrixMetrics:
        """
        Get size metrics for this matrix.
        
        Returns:
            MatrixMetrics with key counts, combination count and stored value count
        """
        key_counts = [len(registry) for registry in self._registries]
        return MatrixMetrics(
            dimension_count=self._dimension_count,
            key_counts=key_counts,
            combination_count=prod(key_counts),
            stored_value_count=sum(1 for _ in self._root.iter_leaves()),
            is_sorted=self.is_sorted()
        )
    
    # Internals
    
    def _registry(self, dimension: int) -> DimensionKeyRegistry:
        validate_index(dimension, self._dimension_count, "dimension")
        return self._registries[dimension]
    
    def _lookup(self, keys: Tuple[Any, ...]) -> Any:
        branch = self._root
        for key in keys[:-1]:
            branch = branch.get_branch(key)
            if branch is None:
                return None
        leaf = branch.get_leaf(keys[-1])
        return leaf.value if leaf is not None else None
    
    def _remove(self, keys: Tuple[Any, ...]) -> None:
        # Walks existing branches only; stops early on a missing level
        branch = self._root
        for key in keys[:-1]:
            branch = branch.get_branch(key)
            if branch is None:
                return
        if branch.remove_leaf(keys[-1]):
            logger.debug(f"Removed value at {keys}")
