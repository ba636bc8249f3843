"""A red-black tree of key/value nodes ordered by a three-way comparator."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Callable, Iterator, Optional

Comparator = Callable[[Any, Any], int]


class Color(IntEnum):
    RED = 0
    BLACK = 1


class RBError(Enum):
    """Outcome of :meth:`RBTree.check`."""

    OK = 0
    TREE_STRUCTURE = 1
    CONSECUTIVE_RED = 2
    BLACK_HEIGHT = 3


class RBNode:
    """A tree node holding one key and its value."""

    __slots__ = ("key", "value", "color", "parent", "left", "right")

    def __init__(self, key: Any, value: Any, color: Color = Color.RED) -> None:
        self.key = key
        self.value = value
        self.color = color
        self.parent: RBNode = self
        self.left: RBNode = self
        self.right: RBNode = self

    def __repr__(self) -> str:
        return f"RBNode({self.key!r}, {self.value!r}, {self.color.name})"


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class RBTree:
    """Red-black tree; keys are unique under the comparator.

    ``cmp(a, b)`` returns a negative number, zero or a positive number as
    ``a`` sorts before, equal to or after ``b``. Without it the keys' own
    ordering is used.
    """

    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        self._cmp: Comparator = cmp if cmp is not None else _natural
        self._nil = RBNode(None, None, Color.BLACK)
        self._root = self._nil
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def root(self) -> Optional[RBNode]:
        return self._public(self._root)

    def _public(self, node: Optional[RBNode]) -> Optional[RBNode]:
        if node is None or node is self._nil:
            return None
        return node

    # lookup -----------------------------------------------------------

    def find(self, key: Any) -> Optional[RBNode]:
        """Return the node holding ``key``, or None."""
        node = self._root
        while node is not self._nil:
            order = self._cmp(key, node.key)
            if order < 0:
                node = node.left
            elif order > 0:
                node = node.right
            else:
                return node
        return None

    def _min(self, node: RBNode) -> RBNode:
        if node is self._nil:
            return node
        while node.left is not self._nil:
            node = node.left
        return node

    def _max(self, node: RBNode) -> RBNode:
        if node is self._nil:
            return node
        while node.right is not self._nil:
            node = node.right
        return node

    def minimum(self) -> Optional[RBNode]:
        return self._public(self._min(self._root))

    def maximum(self) -> Optional[RBNode]:
        return self._public(self._max(self._root))

    def successor(self, node: Optional[RBNode]) -> Optional[RBNode]:
        """Return the node following ``node`` in key order, or None."""
        if node is None or node is self._nil:
            return None
        if node.right is not self._nil:
            return self._min(node.right)
        parent = node.parent
        while parent is not self._nil and node is parent.right:
            node, parent = parent, parent.parent
        return self._public(parent)

    def predecessor(self, node: Optional[RBNode]) -> Optional[RBNode]:
        """Return the node preceding ``node`` in key order, or None."""
        if node is None or node is self._nil:
            return None
        if node.left is not self._nil:
            return self._max(node.left)
        parent = node.parent
        while parent is not self._nil and node is parent.left:
            node, parent = parent, parent.parent
        return self._public(parent)

    def nodes(self) -> Iterator[RBNode]:
        """Yield the nodes in ascending key order."""
        node = self.minimum()
        while node is not None:
            following = self.successor(node)
            yield node
            node = following

    # modification -----------------------------------------------------

    def insert(self, key: Any, value: Any) -> RBNode:
        """Map ``key`` to ``value``, replacing any existing value; return the node."""
        parent = self._nil
        node = self._root
        order = 0
        while node is not self._nil:
            order = self._cmp(key, node.key)
            parent = node
            if order < 0:
                node = node.left
            elif order > 0:
                node = node.right
            else:
                node.value = value
                return node

        new = RBNode(key, value)
        new.parent = parent
        new.left = self._nil
        new.right = self._nil
        self._size += 1

        if parent is self._nil:
            self._root = new
            new.color = Color.BLACK
        else:
            new.color = Color.RED
            if order < 0:
                parent.left = new
            else:
                parent.right = new
            self._fix_insert(new)
        return new

    def delete(self, node: RBNode) -> None:
        """Remove ``node`` from the tree."""
        if node is None or node is self._nil:
            raise ValueError("cannot delete an empty node")
        nil = self._nil
        moved = node
        moved_color = moved.color
        if node.left is nil:
            child = node.right
            self._transplant(node, node.right)
        elif node.right is nil:
            child = node.left
            self._transplant(node, node.left)
        else:
            moved = self._min(node.right)
            moved_color = moved.color
            child = moved.right
            if moved.parent is node:
                child.parent = moved
            else:
                self._transplant(moved, moved.right)
                moved.right = node.right
                moved.right.parent = moved
            self._transplant(node, moved)
            moved.left = node.left
            moved.left.parent = moved
            moved.color = node.color
        if moved_color == Color.BLACK:
            self._fix_delete(child)
        self._size -= 1

    def clear(self) -> None:
        """Remove every node."""
        self._root = self._nil
        self._size = 0

    # balancing --------------------------------------------------------

    def _rotate_left(self, x: RBNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: RBNode) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _transplant(self, u: RBNode, v: RBNode) -> None:
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _fix_insert(self, z: RBNode) -> None:
        while z.parent.color == Color.RED:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.color == Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.color == Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_left(z.parent.parent)
        self._root.color = Color.BLACK

    def _fix_delete(self, x: RBNode) -> None:
        while x is not self._root and x.color == Color.BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color == Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if w.left.color == Color.BLACK and w.right.color == Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.right.color == Color.BLACK:
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_right(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.color == Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if w.right.color == Color.BLACK and w.left.color == Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.left.color == Color.BLACK:
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_left(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self._rotate_right(x.parent)
                    x = self._root
        x.color = Color.BLACK

    # validation -------------------------------------------------------

    def check(self) -> RBError:
        """Verify key order and the red-black rules."""
        return self._check(self._root)[0]

    def _check(self, node: RBNode) -> tuple[RBError, int]:
        nil = self._nil
        if node is nil:
            return RBError.OK, 1
        if node.left is not nil and self._cmp(node.left.key, node.key) >= 0:
            return RBError.TREE_STRUCTURE, 0
        if node.right is not nil and self._cmp(node.right.key, node.key) <= 0:
            return RBError.TREE_STRUCTURE, 0
        if node.color == Color.RED and node.parent.color == Color.RED:
            return RBError.CONSECUTIVE_RED, 0
        left_err, left_height = self._check(node.left)
        if left_err is not RBError.OK:
            return left_err, 0
        right_err, right_height = self._check(node.right)
        if right_err is not RBError.OK:
            return right_err, 0
        if left_height != right_height:
            return RBError.BLACK_HEIGHT, 0
        if node.color == Color.BLACK:
            return RBError.OK, left_height + 1
        return RBError.OK, left_height