"""
Tree nodes backing the multidimensional matrix.

The value tree is a ``Branch`` root whose depth equals the dimension count.
Children of a branch at level ``d < dimension_count - 1`` are branches, the
children of the last level are leaves holding the stored values.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Union


@dataclass
class Leaf:
    """Stored value at the end of a full key path."""
    
    value: Any


@dataclass
class Branch:
    """Mapping from the key of one dimension to the next tree level."""
    
    children: Dict[Any, "Node"] = field(default_factory=dict)
    
    def get_branch(self, key: Any) -> Optional["Branch"]:
        """Return the child branch for key, or None if there is none."""
        child = self.children.get(key)
        if isinstance(child, Branch):
            return child
        return None
    
    def ensure_branch(self, key: Any) -> "Branch":
        """Return the child branch for key, creating it when missing."""
        child = self.get_branch(key)
        if child is None:
            child = Branch()
            self.children[key] = child
        return child
    
    def get_leaf(self, key: Any) -> Optional[Leaf]:
        """Return the leaf for key, or None if there is none."""
        child = self.children.get(key)
        if isinstance(child, Leaf):
            return child
        return None
    
    def put_leaf(self, key: Any, value: Any) -> None:
        self.children[key] = Leaf(value)
    
    def remove_leaf(self, key: Any) -> bool:
        """Remove the leaf for key. Returns True if a leaf was removed."""
        if isinstance(self.children.get(key), Leaf):
            del self.children[key]
            return True
        return False
    
    def iter_leaves(self) -> Iterator[Leaf]:
        """Yield every leaf below this branch."""
        stack = [self]
        while stack:
            branch = stack.pop()
            for child in branch.children.values():
                if isinstance(child, Branch):
                    stack.append(child)
                else:
                    yield child
    
    def clear(self) -> None:
        self.children.clear()


Node = Union[Leaf, Branch]
