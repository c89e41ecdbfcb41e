"""An ordered mapping from unique keys to values backed by an AVL tree."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Iterator, Tuple, Union

from engrus.avl_tree import AvlTree

_MISSING = object()


class AvlTreeMap:
    """A sorted mapping: iteration yields keys in ascending order."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self, items: Union[Mapping, Iterable[Tuple[Any, Any]]] = ()
    ) -> None:
        self._tree = AvlTree()
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.insert(key, value)

    def insert(self, key: Any, value: Any) -> bool:
        """Add ``key`` with ``value`` unless the key is present.

        Returns True if the pair was added; an existing value is left untouched.
        """
        return self._tree.insert_node(key, value) is not None

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` if it is absent."""
        node = self._tree.find_node(key)
        return default if node is None else node.value

    def __getitem__(self, key: Any) -> Any:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: Any, value: Any) -> None:
        node = self._tree.find_node(key)
        if node is None:
            self._tree.insert_node(key, value)
        else:
            node.value = value

    def __delitem__(self, key: Any) -> None:
        self._tree.remove_node(key)

    def __contains__(self, key: Any) -> bool:
        return self._tree.find_node(key) is not None

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._tree.nodes())

    def __reversed__(self) -> Iterator[Any]:
        return (node.key for node in self._tree.reversed_nodes())

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        return ((node.key, node.value) for node in self._tree.nodes())

    def values(self) -> Iterator[Any]:
        """Yield values in ascending key order."""
        return (node.value for node in self._tree.nodes())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AvlTreeMap):
            return len(self) == len(other) and list(self.items()) == list(other.items())
        if isinstance(other, Mapping):
            if len(self) != len(other):
                return False
            for key, value in self.items():
                if key not in other or other[key] != value:
                    return False
            return True
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r})"

    def copy(self) -> "AvlTreeMap":
        """Return an independent map holding the same pairs."""
        return type(self)(self.items())