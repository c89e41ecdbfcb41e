"""An ordered set of unique keys backed by an AVL tree."""

from __future__ import annotations

from collections.abc import Set
from typing import Any, Iterable, Iterator

from engrus.avl_tree import AvlTree


class AvlTreeSet:
    """A sorted set: iteration yields keys in ascending order."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._tree = AvlTree()
        for item in items:
            self.add(item)

    def add(self, key: Any) -> bool:
        """Add ``key``; return True if it was not already present."""
        return self._tree.insert_node(key) is not None

    def remove(self, key: Any) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        self._tree.remove_node(key)

    def discard(self, key: Any) -> bool:
        """Remove ``key`` if present; return True if something was removed."""
        try:
            self._tree.remove_node(key)
        except KeyError:
            return False
        return True

    def __contains__(self, key: Any) -> bool:
        return self._tree.find_node(key) is not None

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._tree.nodes())

    def __reversed__(self) -> Iterator[Any]:
        return (node.key for node in self._tree.reversed_nodes())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AvlTreeSet):
            return len(self) == len(other) and list(self) == list(other)
        if isinstance(other, Set):
            return len(self) == len(other) and all(key in other for key in self)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def copy(self) -> "AvlTreeSet":
        """Return an independent set holding the same keys."""
        return type(self)(self)