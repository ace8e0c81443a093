"""
Per-dimension key registry for the multidimensional matrix.
"""

from functools import cmp_to_key
from typing import Any, Callable, List, Optional, Tuple


class DimensionKeyRegistry:
    """Ordered set of the distinct keys observed for one dimension."""

    def __init__(self, dimension: int):
        """
        Initialize an empty registry.

        Args:
            dimension: Index of the dimension this registry belongs to
        """
        self.dimension = dimension
        self._keys: List[Any] = []

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: Any) -> bool:
        return self.index_of(key) >= 0

    def key_at(self, index: int) -> Any:
        return self._keys[index]

    def index_of(self, key: Any) -> int:
        """
        Get position of key in the registry.

        Keys match by identity or equality, the same way dict lookups in the
        value tree do.

        Args:
            key: Key to look up

        Returns:
            Position of the key, or -1 if it is not registered
        """
        try:
            return self._keys.index(key)
        except ValueError:
            return -1

    def stage(self, key: Any,
              comparator: Optional[Callable[[Any, Any], int]] = None) -> Optional[List[Any]]:
        """
        Build the key list that results from registering key, without applying it.

        Args:
            key: Key to register
            comparator: Active comparator; the staged list is sorted when given

        Returns:
            The new key list, or None if key is already registered
        """
        if self.index_of(key) >= 0:
            return None

        staged = self._keys + [key]
        if comparator is not None:
            staged.sort(key=cmp_to_key(comparator))
        return staged

    def commit(self, staged: List[Any]) -> None:
        """Replace the keys with a list built by stage or sorted_keys."""
        self._keys = staged

    def sorted_keys(self, comparator: Callable[[Any, Any], int]) -> List[Any]:
        """Return a sorted copy of the keys; the registry itself is unchanged."""
        return sorted(self._keys, key=cmp_to_key(comparator))

    def snapshot(self) -> Tuple[Any, ...]:
        """Return the keys in current order as an immutable tuple."""
        return tuple(self._keys)

    def clear(self) -> None:
        self._keys.clear()
