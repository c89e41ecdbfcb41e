"""Self-balancing AVL binary search tree shared by the set and map containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A tree node; ``factor`` is the height of the right subtree minus the left."""

    key: Any
    value: Any = None
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)
    factor: int = 0


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def successor(node: Node) -> Optional[Node]:
    """Return the node holding the next greater key, or None at the end."""
    if node.right is not None:
        return _leftmost(node.right)
    child, parent = node, node.parent
    while parent is not None and child is parent.right:
        child, parent = parent, parent.parent
    return parent


def predecessor(node: Node) -> Optional[Node]:
    """Return the node holding the next smaller key, or None at the start."""
    if node.left is not None:
        return _rightmost(node.left)
    child, parent = node, node.parent
    while parent is not None and child is parent.left:
        child, parent = parent, parent.parent
    return parent


def _subtree_height(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return 1 + max(_subtree_height(node.left), _subtree_height(node.right))


def _balanced_height(node: Optional[Node]) -> Optional[int]:
    """Height of a balanced subtree, or None if some node is out of balance."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(right - left) > 1:
        return None
    return 1 + max(left, right)


class AvlTree:
    """An ordered collection of unique keys, each with an optional value."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def find_node(self, key: Any) -> Optional[Node]:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def insert_node(self, key: Any, value: Any = None) -> Optional[Node]:
        """Insert ``key``; return the new node, or None if the key was present."""
        parent = None
        node = self.root
        while node is not None:
            if node.key == key:
                return None
            parent = node
            node = node.left if key < node.key else node.right

        new = Node(key, value, parent)
        if parent is None:
            self.root = new
        elif key < parent.key:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        self._retrace_after_insert(new)
        return new

    def remove_node(self, key: Any) -> Optional[Node]:
        """Remove ``key`` and return the node now holding the next key, or None.

        Raises KeyError if the key is absent.
        """
        node = self.find_node(key)
        if node is None:
            raise KeyError(key)

        after = successor(node)
        if node.left is not None and node.right is not None:
            target = after
            node.key, node.value = target.key, target.value
            after = node
        else:
            target = node

        child = target.left if target.left is not None else target.right
        parent = target.parent
        from_left = parent is not None and parent.left is target
        self._replace_child(parent, target, child)
        target.parent = target.left = target.right = None
        self._size -= 1
        self._retrace_after_remove(parent, from_left)
        return after

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes in ascending key order."""
        node = _leftmost(self.root) if self.root is not None else None
        while node is not None:
            following = successor(node)
            yield node
            node = following

    def reversed_nodes(self) -> Iterator[Node]:
        """Yield the nodes in descending key order."""
        node = _rightmost(self.root) if self.root is not None else None
        while node is not None:
            preceding = predecessor(node)
            yield node
            node = preceding

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _subtree_height(self.root)

    def is_balanced(self) -> bool:
        """True if every node's subtrees differ in height by at most one."""
        return _balanced_height(self.root) is not None

    def _replace_child(self, parent: Optional[Node], old: Node, new: Optional[Node]) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def _rotate_left(self, node: Node) -> Node:
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._replace_child(node.parent, node, pivot)
        pivot.left = node
        node.parent = pivot
        node.factor = node.factor - 1 - max(pivot.factor, 0)
        pivot.factor = pivot.factor - 1 + min(node.factor, 0)
        return pivot

    def _rotate_right(self, node: Node) -> Node:
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._replace_child(node.parent, node, pivot)
        pivot.right = node
        node.parent = pivot
        node.factor = node.factor + 1 - min(pivot.factor, 0)
        pivot.factor = pivot.factor + 1 + max(node.factor, 0)
        return pivot

    def _rebalance(self, node: Node) -> Node:
        if node.factor == 2:
            if node.right.factor < 0:
                self._rotate_right(node.right)
            return self._rotate_left(node)
        if node.factor == -2:
            if node.left.factor > 0:
                self._rotate_left(node.left)
            return self._rotate_right(node)
        return node

    def _retrace_after_insert(self, child: Node) -> None:
        node = child.parent
        while node is not None:
            node.factor += -1 if child is node.left else 1
            node = self._rebalance(node)
            if node.factor == 0:
                break
            child, node = node, node.parent

    def _retrace_after_remove(self, node: Optional[Node], from_left: bool) -> None:
        while node is not None:
            node.factor += 1 if from_left else -1
            node = self._rebalance(node)
            if abs(node.factor) == 1:
                break
            parent = node.parent
            if parent is None:
                break
            from_left = parent.left is node
            node = parent