"""An ordered key/value table backed by a red-black tree."""

from __future__ import annotations

from typing import Any, Callable, Iterator, NamedTuple, Optional

from .rbtree import Comparator, RBError, RBNode, RBTree


class TreeTableEntry(NamedTuple):
    """One key/value pair of a :class:`TreeTable`."""

    key: Any
    value: Any


class TreeTable:
    """Table of unique keys kept in the order given by a comparator.

    ``cmp(a, b)`` returns a negative number, zero or a positive number as
    ``a`` sorts before, equal to or after ``b``. Without it the keys' own
    ordering is used. Iterating a table yields its entries in key order.
    """

    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        self._tree = RBTree(cmp)

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[TreeTableEntry]:
        for node in self._tree.nodes():
            yield TreeTableEntry(node.key, node.value)

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {value!r}" for key, value in self)
        return f"TreeTable({{{items}}})"

    def _node(self, key: Any) -> RBNode:
        node = self._tree.find(key)
        if node is None:
            raise KeyError(key)
        return node

    def _first(self) -> RBNode:
        node = self._tree.minimum()
        if node is None:
            raise KeyError("table is empty")
        return node

    def _last(self) -> RBNode:
        node = self._tree.maximum()
        if node is None:
            raise KeyError("table is empty")
        return node

    # lookup -----------------------------------------------------------

    def get(self, key: Any) -> Any:
        """Return the value mapped to ``key``; raise KeyError if absent."""
        return self._node(key).value

    def get_first_value(self) -> Any:
        """Return the value of the lowest key."""
        return self._first().value

    def get_last_value(self) -> Any:
        """Return the value of the highest key."""
        return self._last().value

    def get_first_key(self) -> Any:
        return self._first().key

    def get_last_key(self) -> Any:
        return self._last().key

    def get_greater_than(self, key: Any) -> Any:
        """Return the key that immediately follows ``key``.

        ``key`` must be in the table and must not be the highest key.
        """
        following = self._tree.successor(self._node(key))
        if following is None:
            raise KeyError(f"no key greater than {key!r}")
        return following.key

    def get_lesser_than(self, key: Any) -> Any:
        """Return the key that immediately precedes ``key``.

        ``key`` must be in the table and must not be the lowest key.
        """
        preceding = self._tree.predecessor(self._node(key))
        if preceding is None:
            raise KeyError(f"no key lesser than {key!r}")
        return preceding.key

    def contains_key(self, key: Any) -> bool:
        return self._tree.find(key) is not None

    def contains_value(self, value: Any) -> int:
        """Count the entries whose value is ``value`` (by identity)."""
        return sum(1 for node in self._tree.nodes() if node.value is value)

    # modification -----------------------------------------------------

    def add(self, key: Any, value: Any) -> None:
        """Map ``key`` to ``value``, replacing any value it already has."""
        self._tree.insert(key, value)

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        node = self._node(key)
        self._tree.delete(node)
        return node.value

    def remove_first(self) -> Any:
        """Remove the lowest key and return its value."""
        node = self._first()
        self._tree.delete(node)
        return node.value

    def remove_last(self) -> Any:
        """Remove the highest key and return its value."""
        node = self._last()
        self._tree.delete(node)
        return node.value

    def remove_all(self) -> None:
        self._tree.clear()

    # traversal --------------------------------------------------------

    def foreach_key(self, fn: Callable[[Any], Any]) -> None:
        for node in self._tree.nodes():
            fn(node.key)

    def foreach_value(self, fn: Callable[[Any], Any]) -> None:
        for node in self._tree.nodes():
            fn(node.value)

    def iter(self) -> "TreeTableIter":
        """Return an iterator that can remove entries as it walks."""
        return TreeTableIter(self)

    def assert_rb_rules(self) -> RBError:
        """Check key order and the red-black rules; return the outcome."""
        return self._tree.check()


class TreeTableIter:
    """Walks a :class:`TreeTable` in key order, yielding entries.

    The entry last returned can be removed without invalidating the
    iterator.
    """

    def __init__(self, table: TreeTable) -> None:
        self._tree = table._tree
        self._current: Optional[RBNode] = None
        self._next: Optional[RBNode] = self._tree.minimum()

    def __iter__(self) -> "TreeTableIter":
        return self

    def __next__(self) -> TreeTableEntry:
        node = self._next
        if node is None:
            raise StopIteration
        self._current = node
        self._next = self._tree.successor(node)
        return TreeTableEntry(node.key, node.value)

    def remove(self) -> Any:
        """Remove the entry last returned and return its value."""
        node = self._current
        if node is None:
            raise KeyError("no entry was returned since the last removal")
        self._tree.delete(node)
        self._current = None
        return node.value