"""An ordered set backed by a red-black tree."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from .rbtree import Comparator
from .treetable import TreeTable, TreeTableIter


class TreeSet:
    """Set of unique elements kept in the order given by a comparator.

    ``cmp(a, b)`` returns a negative number, zero or a positive number as
    ``a`` sorts before, equal to or after ``b``. Without it the elements'
    own ordering is used. Iterating a set yields its elements in order.
    """

    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        self._table = TreeTable(cmp)

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[Any]:
        for entry in self._table:
            yield entry.key

    def __contains__(self, element: Any) -> bool:
        return self._table.contains_key(element)

    def __repr__(self) -> str:
        return f"TreeSet({list(self)!r})"

    def add(self, element: Any) -> None:
        """Add ``element``; an equal element already present is kept."""
        if not self._table.contains_key(element):
            self._table.add(element, element)

    def remove(self, element: Any) -> Any:
        """Remove ``element`` and return the stored one; raise KeyError if absent."""
        return self._table.remove(element)

    def remove_all(self) -> None:
        self._table.remove_all()

    def get_first(self) -> Any:
        """Return the lowest element; raise KeyError if the set is empty."""
        return self._table.get_first_key()

    def get_last(self) -> Any:
        """Return the highest element; raise KeyError if the set is empty."""
        return self._table.get_last_key()

    def get_greater_than(self, element: Any) -> Any:
        """Return the element that immediately follows ``element``."""
        return self._table.get_greater_than(element)

    def get_lesser_than(self, element: Any) -> Any:
        """Return the element that immediately precedes ``element``."""
        return self._table.get_lesser_than(element)

    def contains(self, element: Any) -> bool:
        return self._table.contains_key(element)

    def foreach(self, fn: Callable[[Any], Any]) -> None:
        self._table.foreach_key(fn)

    def iter(self) -> "TreeSetIter":
        """Return an iterator that can remove elements as it walks."""
        return TreeSetIter(self)


class TreeSetIter:
    """Walks a :class:`TreeSet` in order.

    The element last returned can be removed without invalidating the
    iterator.
    """

    def __init__(self, tree_set: TreeSet) -> None:
        self._inner = TreeTableIter(tree_set._table)

    def __iter__(self) -> "TreeSetIter":
        return self

    def __next__(self) -> Any:
        return next(self._inner).key

    def remove(self) -> Any:
        """Remove the element last returned and return it."""
        return self._inner.remove()